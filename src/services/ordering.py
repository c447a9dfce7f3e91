"""
Service de prise de commande.

OrderService valide une commande candidate, decremente le stock des films
commandes et enregistre la commande, le tout dans une seule transaction :
soit tous les effets sont valides ensemble, soit aucun.

L'etat des films fourni par l'appelant n'est pas fiable : le stock et le
prix sont relus en base pour chaque film reference, sous verrou d'ecriture,
ce qui empeche deux commandes concurrentes de vendre le dernier exemplaire.

Le refus est un resultat normal (PlacementResult.rejected()) et non une
exception. Les pannes de la base sont converties en
PlacementResult.failed() sans nouvelle tentative.
"""

from collections.abc import Sequence
from typing import Optional
from uuid import UUID

from loguru import logger
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from src.core.entities.shop import Film, Order
from src.core.ports.repositories import IFilmRepository
from src.core.value_objects.placement import PlacementResult
from src.infrastructure.persistence.repositories import (
    SQLModelFilmRepository,
    SQLModelOrderRepository,
)
from src.services.order_rules import RejectionRule, check_order_shape, is_below_minimum


def reserve_stock(
    films: IFilmRepository, film_ids: Sequence[UUID]
) -> Optional[dict[UUID, Film]]:
    """
    Relit chaque film reference et decremente son stock en memoire.

    Le decrement est applique au fil du parcours, un exemplaire par reference.
    Rien n'est ecrit ici : l'appelant persiste les films uniquement si toutes
    les regles suivantes sont aussi satisfaites.

    Args:
        films: Repository des films, lie a la transaction courante
        film_ids: Identifiants references par la commande, avec repetitions

    Returns:
        Les films relus et decrementes par identifiant, ou None si un film
        est inconnu ou epuise
    """
    stock: dict[UUID, Film] = {}
    for film_id in film_ids:
        film = stock.get(film_id)
        if film is None:
            film = films.find_for_update(film_id)
            if film is None:
                logger.debug(f"Film inconnu: {film_id}")
                return None
            stock[film_id] = film

        if film.amount < 1:
            return None
        film.amount -= 1
    return stock


class OrderService:
    """
    Service des commandes : consultation et prise de commande.

    Chaque operation ouvre sa propre session et sa propre transaction sur
    l'engine fourni, ce qui permet des appels concurrents depuis plusieurs
    threads.

    Example:
        service = OrderService(engine)
        result = service.place_order(Order(items=[Film(id=film_id)]))
        if result.is_accepted:
            print(result.order.created_at)
    """

    def __init__(self, engine: Engine) -> None:
        """
        Initialise le service.

        Args:
            engine: Engine SQLAlchemy de la base de la boutique
        """
        self._engine = engine

    def find_all(self) -> list[Order]:
        """Liste toutes les commandes avec leurs films."""
        with Session(self._engine) as session, session.begin():
            return SQLModelOrderRepository(session).find_all()

    def find(self, order_id: UUID) -> Optional[Order]:
        """Recupere une commande, None si inconnue."""
        with Session(self._engine) as session, session.begin():
            return SQLModelOrderRepository(session).find(order_id)

    def place_order(self, order: Order) -> PlacementResult:
        """
        Passe une commande candidate.

        Les regles de forme (vide, doublons, nombre de lignes, parite) sont
        evaluees d'abord, puis dans la transaction : disponibilite de chaque
        film avec decrement provisoire, puis montant minimum. La transaction
        n'est validee qu'apres la derniere regle.

        Args:
            order: Commande candidate (seuls les identifiants des films comptent)

        Returns:
            ACCEPTED avec la commande persistee, REJECTED sans aucun effet,
            ou INFRASTRUCTURE_FAILURE si la base a echoue
        """
        film_ids = order.film_ids

        violation = check_order_shape(film_ids)
        if violation is not None:
            return self._reject(order, violation)

        try:
            with Session(self._engine) as session:
                transaction = session.begin()
                films = SQLModelFilmRepository(session)
                orders = SQLModelOrderRepository(session)

                # Une commande enregistree n'est jamais mise a jour
                if orders.find(order.id) is not None:
                    transaction.rollback()
                    return self._reject(order, RejectionRule.ALREADY_PLACED)

                stock = reserve_stock(films, film_ids)
                if stock is None:
                    transaction.rollback()
                    return self._reject(order, RejectionRule.OUT_OF_STOCK)

                total_price = sum(stock[film_id].price for film_id in film_ids)
                if is_below_minimum(total_price):
                    transaction.rollback()
                    return self._reject(order, RejectionRule.BELOW_MINIMUM)

                for film in stock.values():
                    films.save(film)
                placed = orders.save(
                    Order(id=order.id, items=[stock[film_id] for film_id in film_ids])
                )
                transaction.commit()
        except SQLAlchemyError as e:
            logger.exception(f"Echec technique de la commande {order.id}")
            return PlacementResult.failed(str(e))

        logger.info(
            f"Commande {placed.id} acceptee",
            films=len(placed.items),
            total_price=total_price,
        )
        return PlacementResult.accepted(placed)

    def _reject(self, order: Order, rule: RejectionRule) -> PlacementResult:
        logger.debug(f"Commande {order.id} refusee", rule=rule.value)
        return PlacementResult.rejected()
