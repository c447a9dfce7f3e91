"""
Modeles SQLModel pour la base de donnees FilmShop.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- films: Catalogue des films avec stock et prix
- orders: Commandes passees
- order_films: Association ordonnee commande -> films
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, DateTime
from sqlmodel import Field, SQLModel


class FilmModel(SQLModel, table=True):
    """
    Modele representant un film du catalogue.

    amount et price sont des entiers positifs ou nuls : le stock est
    decremente uniquement lors de l'acceptation d'une commande.
    """

    __tablename__ = "films"
    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_films_amount_non_negative"),
        CheckConstraint("price >= 0", name="ck_films_price_non_negative"),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(default="", index=True)
    director: str | None = None
    cast: str | None = None  # Distribution, texte libre
    duration_minutes: int | None = None
    amount: int = Field(default=0, ge=0)
    price: int = Field(default=0, ge=0)


class OrderModel(SQLModel, table=True):
    """
    Modele representant une commande.

    created_at est renseigne lors de la premiere insertion et n'est
    jamais modifie ensuite. La date est toujours en UTC avec fuseau.
    """

    __tablename__ = "orders"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    created_at: datetime | None = Field(default=None, sa_type=DateTime(timezone=True))


class OrderFilmLinkModel(SQLModel, table=True):
    """
    Association entre une commande et ses films.

    La position conserve l'ordre des films tel que fourni a la commande.
    """

    __tablename__ = "order_films"

    order_id: UUID = Field(foreign_key="orders.id", primary_key=True)
    position: int = Field(primary_key=True)
    film_id: UUID = Field(foreign_key="films.id", index=True)
