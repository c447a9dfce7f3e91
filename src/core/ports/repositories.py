"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fourniront les mécanismes de stockage concrets
(SQLite via SQLModel, en mémoire pour les tests, etc.).

Toutes les entités partagent le même contrat de base : recherche par identifiant
et sauvegarde idempotente par clé (insertion si la clé est inconnue,
remplacement complet sinon).
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar
from uuid import UUID

from src.core.entities.shop import Film, Order

T = TypeVar("T")


class IEntityRepository(ABC, Generic[T]):
    """
    Interface générique de stockage par identité.

    Définit les opérations communes à toutes les entités identifiées par une clé.
    """

    @abstractmethod
    def find(self, entity_id: UUID) -> Optional[T]:
        """Récupère une entité par son identifiant. Retourne None si inconnue."""
        ...

    @abstractmethod
    def save(self, entity: T) -> T:
        """Sauvegarde une entité (insertion ou remplacement complet)."""
        ...


class IFilmRepository(IEntityRepository[Film]):
    """
    Interface de stockage du catalogue de films.
    """

    @abstractmethod
    def find_all(self) -> list[Film]:
        """Liste tous les films du catalogue."""
        ...

    @abstractmethod
    def find_for_update(self, film_id: UUID) -> Optional[Film]:
        """Récupère un film en verrouillant sa ligne jusqu'à la fin de la transaction."""
        ...


class IOrderRepository(IEntityRepository[Order]):
    """
    Interface de stockage des commandes.
    """

    @abstractmethod
    def find_all(self) -> list[Order]:
        """Liste toutes les commandes avec leurs films résolus."""
        ...
