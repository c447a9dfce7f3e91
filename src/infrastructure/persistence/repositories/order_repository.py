"""
Implementation SQLModel du repository Order.

Implemente l'interface IOrderRepository. Les films d'une commande sont
stockes dans la table d'association order_films, avec leur position
pour conserver l'ordre fourni a la commande.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlmodel import Session, select

from src.core.entities.shop import Film, Order
from src.core.ports.repositories import IOrderRepository
from src.infrastructure.persistence.models import (
    FilmModel,
    OrderFilmLinkModel,
    OrderModel,
)
from src.infrastructure.persistence.repositories.entity_repository import (
    SQLModelEntityRepository,
)
from src.infrastructure.persistence.repositories.film_repository import film_to_entity


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Ramene une date lue en base en UTC avec fuseau (SQLite le perd au stockage)."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SQLModelOrderRepository(SQLModelEntityRepository[Order, OrderModel], IOrderRepository):
    """
    Repository SQLModel pour les commandes.

    La date de creation est attribuee a la premiere insertion uniquement.
    """

    def __init__(self, session: Session) -> None:
        super().__init__(session, OrderModel, lambda order: order.id)

    def _films_by_order(self, order_ids: list[UUID]) -> dict[UUID, list[Film]]:
        """Resout les films de plusieurs commandes en une seule requete."""
        films: dict[UUID, list[Film]] = {order_id: [] for order_id in order_ids}
        if not order_ids:
            return films

        statement = (
            select(OrderFilmLinkModel, FilmModel)
            .join(FilmModel, FilmModel.id == OrderFilmLinkModel.film_id)
            .where(OrderFilmLinkModel.order_id.in_(order_ids))
            .order_by(OrderFilmLinkModel.order_id, OrderFilmLinkModel.position)
        )
        for link, film_model in self._session.exec(statement).all():
            films[link.order_id].append(film_to_entity(film_model))
        return films

    def _to_entity(self, model: OrderModel) -> Order:
        return Order(
            id=model.id,
            items=self._films_by_order([model.id])[model.id],
            created_at=as_utc(model.created_at),
        )

    def _apply(self, entity: Order, model: OrderModel) -> None:
        # La ligne orders doit exister avant ses associations (cles etrangeres)
        self._session.flush()

        # Remplacement complet de la liste de films
        existing_links = self._session.exec(
            select(OrderFilmLinkModel).where(OrderFilmLinkModel.order_id == entity.id)
        ).all()
        for link in existing_links:
            self._session.delete(link)
        self._session.flush()

        for position, film in enumerate(entity.items):
            self._session.add(
                OrderFilmLinkModel(order_id=entity.id, position=position, film_id=film.id)
            )

    def _on_insert(self, entity: Order, model: OrderModel) -> None:
        model.created_at = datetime.now(timezone.utc)

    def find_all(self) -> list[Order]:
        """Liste toutes les commandes avec leurs films resolus (ordre non garanti)."""
        models = self._session.exec(select(OrderModel)).all()
        films = self._films_by_order([model.id for model in models])
        return [
            Order(id=model.id, items=films[model.id], created_at=as_utc(model.created_at))
            for model in models
        ]
