"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- PlacementStatus : Issue d'une prise de commande (ACCEPTED, REJECTED, INFRASTRUCTURE_FAILURE)
- PlacementResult : Resultat d'une prise de commande
"""

from src.core.value_objects.placement import PlacementResult, PlacementStatus

__all__ = [
    "PlacementResult",
    "PlacementStatus",
]
