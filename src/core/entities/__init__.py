"""
Entites metier du domaine.

Les entites sont des objets mutables dotes d'une identite stable (leur id).

Exports:
- Film: Film du catalogue avec stock et prix
- Order: Commande referencant des films
"""

from src.core.entities.shop import Film, Order

__all__ = [
    "Film",
    "Order",
]
