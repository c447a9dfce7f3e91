"""
Implementation SQLModel du repository Film.

Implemente l'interface IFilmRepository pour la persistance du catalogue
via le stockage generique par identite.
"""

from typing import Optional
from uuid import UUID

from sqlmodel import Session, select

from src.core.entities.shop import Film
from src.core.ports.repositories import IFilmRepository
from src.infrastructure.persistence.models import FilmModel
from src.infrastructure.persistence.repositories.entity_repository import (
    SQLModelEntityRepository,
)


def film_to_entity(model: FilmModel) -> Film:
    """Convertit un FilmModel en entite Film."""
    return Film(
        id=model.id,
        title=model.title,
        director=model.director,
        cast=model.cast,
        duration_minutes=model.duration_minutes,
        amount=model.amount,
        price=model.price,
    )


class SQLModelFilmRepository(SQLModelEntityRepository[Film, FilmModel], IFilmRepository):
    """
    Repository SQLModel pour le catalogue de films.

    Implemente IFilmRepository avec conversion bidirectionnelle
    entre l'entite Film (domaine) et FilmModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        super().__init__(session, FilmModel, lambda film: film.id)

    def _to_entity(self, model: FilmModel) -> Film:
        return film_to_entity(model)

    def _apply(self, entity: Film, model: FilmModel) -> None:
        model.title = entity.title
        model.director = entity.director
        model.cast = entity.cast
        model.duration_minutes = entity.duration_minutes
        model.amount = entity.amount
        model.price = entity.price

    def find_all(self) -> list[Film]:
        """Liste tous les films du catalogue (ordre non garanti)."""
        models = self._session.exec(select(FilmModel)).all()
        return [self._to_entity(model) for model in models]

    def find_for_update(self, film_id: UUID) -> Optional[Film]:
        """
        Recupere un film en verrouillant sa ligne (SELECT ... FOR UPDATE).

        SQLite ignore la clause : le verrou y est pris des le debut de la
        transaction (BEGIN IMMEDIATE, voir database.py).
        """
        statement = (
            select(FilmModel)
            .where(FilmModel.id == film_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None
