"""
Application FastAPI de FilmShop.

Initialise l'application web avec le Container DI et monte les routes
du catalogue et des commandes.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from loguru import logger

from ..container import Container
from .routes.films import router as films_router
from .routes.orders import router as orders_router


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application web.

    Args:
        container: Container DI a utiliser (defaut: nouveau Container)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialise la base au démarrage."""
        app.state.container.database.init()
        logger.info("API FilmShop démarrée")
        yield
        app.state.container.database.shutdown()

    app = FastAPI(title="FilmShop", lifespan=lifespan)
    app.state.container = container if container is not None else Container()

    app.include_router(films_router)
    app.include_router(orders_router)
    return app


app = create_app()
