"""
Module de persistance relationnelle pour FilmShop.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Configuration de l'engine, session factory, initialisation
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Stockage par identite et repositories films/commandes

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.

Usage:
    from src.infrastructure.persistence import create_db_engine, init_db

    engine = create_db_engine("sqlite:///filmshop.db")
    init_db(engine)
"""

from src.infrastructure.persistence.database import (
    create_db_engine,
    init_db,
)
from src.infrastructure.persistence.models import (
    FilmModel,
    OrderFilmLinkModel,
    OrderModel,
)

__all__ = [
    "create_db_engine",
    "init_db",
    "FilmModel",
    "OrderModel",
    "OrderFilmLinkModel",
]
