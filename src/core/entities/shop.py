"""
Entites du magasin de films.

Un Film est une entree du catalogue avec son stock et son prix.
Une Order (commande) reference une sequence ordonnee de films.

L'identite de chaque entite est portee uniquement par son id (UUID genere a la
creation) : deux instances de meme id sont egales, quelles que soient les
valeurs de leurs autres champs.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4


@dataclass(eq=False)
class Film:
    """
    Film disponible a la vente.

    Attributes:
        id: Identifiant unique, genere a la creation
        title: Titre du film
        director: Realisateur
        cast: Distribution (texte libre)
        duration_minutes: Duree en minutes
        amount: Nombre d'exemplaires en stock (>= 0)
        price: Prix unitaire en unites entieres de la devise (>= 0)
    """

    id: UUID = field(default_factory=uuid4)
    title: str = ""
    director: Optional[str] = None
    cast: Optional[str] = None
    duration_minutes: Optional[int] = None
    amount: int = 0
    price: int = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Film):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(eq=False)
class Order:
    """
    Commande passee dans le magasin.

    Une commande candidate n'a pas encore ete persistee : created_at vaut None.
    La date de creation est attribuee par la couche de persistance lors de la
    premiere insertion et n'est plus jamais modifiee.

    Attributes:
        id: Identifiant unique, genere a la creation
        items: Films commandes, dans l'ordre fourni par l'appelant
        created_at: Date de creation (None tant que non persistee)
    """

    id: UUID = field(default_factory=uuid4)
    items: list[Film] = field(default_factory=list)
    created_at: Optional[datetime] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def film_ids(self) -> list[UUID]:
        """Identifiants des films references, avec repetitions."""
        return [film.id for film in self.items]
