"""
Service du catalogue de films.

Enveloppe transactionnelle autour de SQLModelFilmRepository pour l'API
et la CLI : chaque appel s'execute dans sa propre transaction.
"""

from typing import Optional
from uuid import UUID

from loguru import logger
from sqlalchemy import Engine
from sqlmodel import Session

from src.core.entities.shop import Film
from src.infrastructure.persistence.repositories import SQLModelFilmRepository


class FilmService:
    """Consultation et edition du catalogue."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def find_all(self) -> list[Film]:
        with Session(self._engine) as session, session.begin():
            return SQLModelFilmRepository(session).find_all()

    def find(self, film_id: UUID) -> Optional[Film]:
        with Session(self._engine) as session, session.begin():
            return SQLModelFilmRepository(session).find(film_id)

    def save(self, film: Film) -> Film:
        """Sauvegarde un film (insertion ou mise a jour)."""
        with Session(self._engine) as session, session.begin():
            return SQLModelFilmRepository(session).save(film)

    def add(self, film: Film) -> Optional[Film]:
        """
        Ajoute un nouveau film au catalogue.

        Returns:
            Le film enregistre, ou None si son identifiant existe deja
        """
        with Session(self._engine) as session, session.begin():
            repo = SQLModelFilmRepository(session)
            if repo.find(film.id) is not None:
                return None
            saved = repo.save(film)
        logger.info(f"Film ajoute: {saved.title}", film_id=str(saved.id))
        return saved

    def update(self, film: Film) -> Optional[Film]:
        """
        Met a jour un film existant.

        Returns:
            Le film mis a jour, ou None si son identifiant est inconnu
        """
        with Session(self._engine) as session, session.begin():
            repo = SQLModelFilmRepository(session)
            if repo.find(film.id) is None:
                return None
            return repo.save(film)
