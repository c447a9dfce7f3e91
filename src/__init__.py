"""
FilmShop - Backend de boutique de films.

Ce package fournit un catalogue de films et la prise de commandes,
exposés en HTTP (FastAPI) et en ligne de commande (Typer), avec une
persistance relationnelle via SQLModel.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur)
- services/ : Couche application (cas d'utilisation, orchestration)
- infrastructure/ : Persistance (modèles SQLModel, repositories)
- web/ : API HTTP
"""
