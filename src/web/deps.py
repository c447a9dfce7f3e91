"""
Dépendances partagées de l'application web.

Fournit les services métier depuis le Container DI attaché à l'application.
"""

from fastapi import Request

from ..container import Container
from ..services.catalog import FilmService
from ..services.ordering import OrderService


def get_container(request: Request) -> Container:
    """Container DI initialisé par le lifespan de l'application."""
    return request.app.state.container


def get_film_service(request: Request) -> FilmService:
    return get_container(request).film_service()


def get_order_service(request: Request) -> OrderService:
    return get_container(request).order_service()
