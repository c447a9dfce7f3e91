"""
Regles metier de validation d'une commande candidate.

Les regles sont evaluees dans l'ordre suivant, la premiere en echec
entraine le refus de la commande :
1. La commande contient au moins un film
2. Aucun film n'est reference deux fois
3. Pas plus de MAX_ORDER_LINES films distincts
4. Aucun film n'est repete un nombre impair de fois
5. Chaque film est en stock (verifie par OrderService sur l'etat en base)
6. Le montant total atteint MIN_ORDER_VALUE

Les regles 1 a 4 ne dependent que des identifiants fournis et sont des
fonctions pures. Les regles 2 et 4 restent deux controles distincts.
"""

from collections import Counter
from collections.abc import Sequence
from enum import Enum
from typing import Optional
from uuid import UUID

# Nombre maximum de films distincts par commande
MAX_ORDER_LINES = 3

# Montant minimum d'une commande (unites entieres de la devise)
MIN_ORDER_VALUE = 10


class RejectionRule(Enum):
    """Regle ayant provoque un refus. Journalisee, jamais exposee a l'appelant."""

    EMPTY = "empty"
    DUPLICATE = "duplicate"
    TOO_MANY_LINES = "too_many_lines"
    UNPAIRED = "unpaired"
    OUT_OF_STOCK = "out_of_stock"
    BELOW_MINIMUM = "below_minimum"
    ALREADY_PLACED = "already_placed"


def is_empty(film_ids: Sequence[UUID]) -> bool:
    return len(film_ids) == 0


def has_duplicates(film_ids: Sequence[UUID]) -> bool:
    """Vrai si l'ensemble des identifiants est plus petit que la liste brute."""
    return len(set(film_ids)) < len(film_ids)


def exceeds_line_limit(film_ids: Sequence[UUID], limit: int = MAX_ORDER_LINES) -> bool:
    return len(set(film_ids)) > limit


def has_unpaired_repeats(film_ids: Sequence[UUID]) -> bool:
    """
    Vrai si un film est repete un nombre impair de fois (3, 5, ...).

    Un film present une seule fois n'est pas une repetition.
    """
    counts = Counter(film_ids)
    return any(count > 1 and count % 2 == 1 for count in counts.values())


def is_below_minimum(total_price: int, minimum: int = MIN_ORDER_VALUE) -> bool:
    return total_price < minimum


def check_order_shape(film_ids: Sequence[UUID]) -> Optional[RejectionRule]:
    """
    Evalue les regles 1 a 4 sur la liste brute des identifiants.

    Args:
        film_ids: Identifiants des films, avec repetitions, dans l'ordre fourni

    Returns:
        La premiere regle en echec, ou None si la commande est bien formee
    """
    if is_empty(film_ids):
        return RejectionRule.EMPTY
    if has_duplicates(film_ids):
        return RejectionRule.DUPLICATE
    if exceeds_line_limit(film_ids):
        return RejectionRule.TOO_MANY_LINES
    if has_unpaired_repeats(film_ids):
        return RejectionRule.UNPAIRED
    return None
