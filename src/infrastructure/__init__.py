"""
Couche infrastructure de FilmShop.

Ce module contient les implementations concretes des interfaces definies
dans la couche domaine (ports). Il gere les preoccupations techniques :

- persistence/ : Stockage relationnel avec SQLModel (modeles et repositories)

Architecture hexagonale : les adapters ici implementent les ports du domaine,
permettant de changer l'implementation (ex: PostgreSQL au lieu de SQLite)
sans modifier la logique metier.
"""
