"""
Point d'entrée CLI de FilmShop.

Initialise le container DI, configure le logging et fournit les commandes CLI
de consultation du catalogue et de prise de commande.
"""

from datetime import datetime, timezone
from typing import Annotated, Optional
from uuid import UUID

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from .config import Settings
from .container import Container
from .core.entities.shop import Film, Order
from .core.value_objects.placement import PlacementStatus
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="filmshop",
    help="Boutique de films : catalogue et commandes",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


def _init_database() -> None:
    # Resource : les tables ne sont creees qu'au premier appel
    container.database.init()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Serveur : {config.host}:{config.port}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"FilmShop v{__version__}")


@app.command()
def films() -> None:
    """Liste le catalogue de films."""
    _init_database()
    catalog = container.film_service().find_all()

    table = Table(title=f"Catalogue ({len(catalog)} films)")
    table.add_column("ID", style="dim")
    table.add_column("Titre", style="cyan")
    table.add_column("Réalisateur")
    table.add_column("Durée", justify="right")
    table.add_column("Stock", justify="right")
    table.add_column("Prix", justify="right", style="green")
    for film in sorted(catalog, key=lambda f: f.title):
        table.add_row(
            str(film.id),
            film.title,
            film.director or "-",
            f"{film.duration_minutes} min" if film.duration_minutes else "-",
            str(film.amount),
            str(film.price),
        )
    console.print(table)


@app.command(name="add-film")
def add_film(
    title: Annotated[str, typer.Argument(help="Titre du film")],
    price: Annotated[int, typer.Option("--price", "-p", min=0, help="Prix unitaire")] = 0,
    amount: Annotated[int, typer.Option("--amount", "-a", min=0, help="Stock initial")] = 0,
    director: Annotated[Optional[str], typer.Option(help="Réalisateur")] = None,
    cast: Annotated[Optional[str], typer.Option(help="Distribution")] = None,
    duration: Annotated[
        Optional[int], typer.Option("--duration", min=0, help="Durée en minutes")
    ] = None,
) -> None:
    """Ajoute un film au catalogue."""
    _init_database()
    film = Film(
        title=title,
        director=director,
        cast=cast,
        duration_minutes=duration,
        amount=amount,
        price=price,
    )
    saved = container.film_service().add(film)
    if saved is None:
        console.print(f"[red]Film déjà existant : {film.id}[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]Film ajouté :[/green] {saved.title} ({saved.id})")


@app.command()
def orders() -> None:
    """Liste les commandes passées."""
    _init_database()
    placed = container.order_service().find_all()

    table = Table(title=f"Commandes ({len(placed)})")
    table.add_column("ID", style="dim")
    table.add_column("Date")
    table.add_column("Films", style="cyan")
    table.add_column("Total", justify="right", style="green")
    oldest = datetime.min.replace(tzinfo=timezone.utc)
    for order in sorted(placed, key=lambda o: o.created_at or oldest):
        table.add_row(
            str(order.id),
            order.created_at.strftime("%Y-%m-%d %H:%M:%S") if order.created_at else "-",
            ", ".join(film.title for film in order.items),
            str(sum(film.price for film in order.items)),
        )
    console.print(table)


@app.command()
def order(
    film_ids: Annotated[list[UUID], typer.Argument(help="Identifiants des films à commander")],
) -> None:
    """Passe une commande sur un ou plusieurs films."""
    _init_database()
    result = container.order_service().place_order(
        Order(items=[Film(id=film_id) for film_id in film_ids])
    )

    if result.status is PlacementStatus.ACCEPTED:
        console.print(f"[green]Commande acceptée :[/green] {result.order.id}")
        return
    if result.status is PlacementStatus.REJECTED:
        console.print("[yellow]Commande refusée[/yellow]")
        raise typer.Exit(code=1)
    console.print(f"[red]Erreur technique :[/red] {result.error}")
    raise typer.Exit(code=2)


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'écoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'écoute")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web FilmShop."""
    import uvicorn

    config = get_config()
    host = host or config.host
    port = port or config.port
    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("src.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    _init_database()

    logger.info("Démarrage de FilmShop", version=__version__)

    app()


if __name__ == "__main__":
    main()
