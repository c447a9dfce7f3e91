"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des données
- IEntityRepository : Stockage générique par identité
- IFilmRepository : Stockage du catalogue de films
- IOrderRepository : Stockage des commandes
"""

from src.core.ports.repositories import (
    IEntityRepository,
    IFilmRepository,
    IOrderRepository,
)

__all__ = [
    "IEntityRepository",
    "IFilmRepository",
    "IOrderRepository",
]
