"""
Stockage generique par identite.

SQLModelEntityRepository fournit la recherche par cle et la sauvegarde
idempotente (upsert) pour n'importe quel couple entite domaine / modele DB.
Une specialisation fournit :
- la fonction d'extraction de cle de l'entite
- la conversion modele -> entite (_to_entity)
- la copie des champs entite -> modele (_apply)

La sauvegarde n'effectue pas de commit : les ecritures sont envoyees
(flush) dans la transaction courante et deviennent durables au commit
de l'unite de travail englobante (voir services/).
"""

from abc import abstractmethod
from collections.abc import Callable
from typing import Generic, Optional, TypeVar
from uuid import UUID

from loguru import logger
from sqlmodel import Session, SQLModel

from src.core.ports.repositories import IEntityRepository

E = TypeVar("E")
M = TypeVar("M", bound=SQLModel)


class SQLModelEntityRepository(IEntityRepository[E], Generic[E, M]):
    """
    Repository SQLModel generique, parametre par le type d'entite et de modele.

    Example:
        class SQLModelFilmRepository(SQLModelEntityRepository[Film, FilmModel]):
            def __init__(self, session):
                super().__init__(session, FilmModel, lambda film: film.id)
    """

    def __init__(
        self,
        session: Session,
        model_class: type[M],
        key_of: Callable[[E], UUID],
    ) -> None:
        """
        Initialise le repository.

        Args:
            session: Session SQLModel active pour les operations DB
            model_class: Classe du modele table (cle primaire "id")
            key_of: Fonction retournant la cle d'une entite
        """
        self._session = session
        self._model_class = model_class
        self._key_of = key_of

    @abstractmethod
    def _to_entity(self, model: M) -> E:
        """Convertit un modele DB en entite domaine."""

    @abstractmethod
    def _apply(self, entity: E, model: M) -> None:
        """Copie tous les champs persistants de l'entite dans le modele."""

    def _on_insert(self, entity: E, model: M) -> None:
        """Renseigne les champs fixes a la premiere insertion (aucun par defaut)."""

    def find(self, entity_id: UUID) -> Optional[E]:
        """Recupere une entite par son identifiant, None si inconnue."""
        model = self._session.get(self._model_class, entity_id)
        if model is None:
            return None
        return self._to_entity(model)

    def save(self, entity: E) -> E:
        """
        Sauvegarde une entite : insertion si la cle est inconnue,
        remplacement de tous les champs sinon.

        Returns:
            L'entite telle qu'elle est desormais stockee
        """
        key = self._key_of(entity)
        model = self._session.get(self._model_class, key)

        if model is None:
            model = self._model_class(id=key)
            self._on_insert(entity, model)
            self._session.add(model)
            self._apply(entity, model)
            logger.debug(f"Insertion {self._model_class.__tablename__} {key}")
        else:
            self._apply(entity, model)
            self._session.add(model)
            logger.debug(f"Remplacement {self._model_class.__tablename__} {key}")

        self._session.flush()
        return self._to_entity(model)
