"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans src/core/ports/repositories.py, utilisant SQLModel pour
la persistance.

Chaque repository :
- Specialise le stockage generique par identite (SQLModelEntityRepository)
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from src.infrastructure.persistence.repositories.entity_repository import (
    SQLModelEntityRepository,
)
from src.infrastructure.persistence.repositories.film_repository import (
    SQLModelFilmRepository,
)
from src.infrastructure.persistence.repositories.order_repository import (
    SQLModelOrderRepository,
)

__all__ = [
    "SQLModelEntityRepository",
    "SQLModelFilmRepository",
    "SQLModelOrderRepository",
]
