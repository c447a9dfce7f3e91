"""
Resultat de la prise de commande.

Le refus d'une commande est un resultat attendu et frequent : il est renvoye
comme une valeur et non leve comme une exception. Les causes de refus ne sont
pas distinguees pour l'appelant.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.core.entities.shop import Order


class PlacementStatus(Enum):
    """Issue possible d'une prise de commande."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"
    INFRASTRUCTURE_FAILURE = "infrastructure_failure"


@dataclass(frozen=True)
class PlacementResult:
    """
    Resultat immutable d'une prise de commande.

    Attributes:
        status: Issue de l'operation
        order: Commande persistee (uniquement si ACCEPTED)
        error: Description de la panne (uniquement si INFRASTRUCTURE_FAILURE)
    """

    status: PlacementStatus
    order: Optional[Order] = None
    error: Optional[str] = None

    @classmethod
    def accepted(cls, order: Order) -> "PlacementResult":
        return cls(status=PlacementStatus.ACCEPTED, order=order)

    @classmethod
    def rejected(cls) -> "PlacementResult":
        return cls(status=PlacementStatus.REJECTED)

    @classmethod
    def failed(cls, error: str) -> "PlacementResult":
        return cls(status=PlacementStatus.INFRASTRUCTURE_FAILURE, error=error)

    @property
    def is_accepted(self) -> bool:
        return self.status is PlacementStatus.ACCEPTED

    @property
    def is_rejected(self) -> bool:
        return self.status is PlacementStatus.REJECTED
