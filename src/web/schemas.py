"""
Schemas pydantic de l'API HTTP.

Traduisent les entites du domaine (dataclass) vers et depuis le JSON.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from ..core.entities.shop import Film


class FilmIn(BaseModel):
    """Corps de requete pour la creation ou la mise a jour d'un film."""

    id: Optional[UUID] = None
    title: str = ""
    director: Optional[str] = None
    cast: Optional[str] = None
    duration_minutes: Optional[int] = Field(default=None, ge=0)
    amount: int = Field(default=0, ge=0)
    price: int = Field(default=0, ge=0)

    def to_entity(self, film_id: Optional[UUID] = None) -> Film:
        """Construit l'entite Film, en generant un id si aucun n'est fourni."""
        fields = self.model_dump(exclude={"id"})
        target_id = film_id or self.id
        if target_id is None:
            return Film(**fields)
        return Film(id=target_id, **fields)


class FilmOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    director: Optional[str] = None
    cast: Optional[str] = None
    duration_minutes: Optional[int] = None
    amount: int
    price: int


class FilmRef(BaseModel):
    """Reference a un film du catalogue : seul l'id est pris en compte."""

    id: UUID


class OrderIn(BaseModel):
    """Commande candidate."""

    items: list[FilmRef] = Field(default_factory=list)


class OrderOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    items: list[FilmOut]
    created_at: Optional[datetime] = None
