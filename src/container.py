"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web :
configuration, engine de base de donnees et services metier.
"""

from dependency_injector import containers, providers

from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db
from .services.catalog import FilmService
from .services.ordering import OrderService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree les tables une fois
        films = container.film_service().find_all()

    En test, l'engine peut etre remplace par une base temporaire :
        container.engine.override(create_db_engine(f"sqlite:///{tmp_path}/shop.db"))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Engine partage par toutes les sessions (pool de connexions)
    engine = providers.Singleton(
        create_db_engine,
        db_url=config.provided.database_url,
        timeout=config.provided.database_timeout,
    )

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db, engine=engine)

    # Services - Factory, chaque operation ouvre sa propre session
    film_service = providers.Factory(FilmService, engine=engine)
    order_service = providers.Factory(OrderService, engine=engine)
