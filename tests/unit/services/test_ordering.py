"""
Tests for OrderService - order placement engine.

Tests covering:
- Each rejection rule, with no change to stock and no order persisted
- Acceptance: stock decremented by one, order persisted with its timestamp
- Authoritative state re-read from the database (caller values ignored)
- Infrastructure failures converted to INFRASTRUCTURE_FAILURE with rollback
- Order queries (find, find_all)
"""

from datetime import timedelta
from unittest.mock import patch
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from src.core.entities.shop import Film, Order
from src.core.value_objects.placement import PlacementStatus
from src.services.ordering import OrderService, reserve_stock


def _candidate(*films: Film) -> Order:
    """Commande candidate ne portant que les ids des films."""
    return Order(items=[Film(id=film.id) for film in films])


@pytest.fixture
def service(engine) -> OrderService:
    return OrderService(engine)


# ============================================================================
# Refus
# ============================================================================


class TestRejections:
    """Chaque regle en echec refuse la commande sans aucun effet."""

    def test_commande_vide_refusee(self, service, make_film, stock_of, order_count):
        film = make_film(amount=3)

        result = service.place_order(Order())

        assert result.status is PlacementStatus.REJECTED
        assert stock_of(film.id) == 3
        assert order_count() == 0

    def test_doublon_refuse(self, service, make_film, stock_of, order_count):
        """Le meme film reference deux fois (egalite par id) est refuse."""
        film = make_film(amount=5, price=20)
        order = Order(items=[Film(id=film.id), Film(id=film.id, title="copie")])

        result = service.place_order(order)

        assert result.is_rejected
        assert stock_of(film.id) == 5
        assert order_count() == 0

    def test_plus_de_trois_films_refuse(self, service, make_film, stock_of, order_count):
        films = [make_film(f"Film {i}", amount=2, price=5) for i in range(4)]

        result = service.place_order(_candidate(*films))

        assert result.is_rejected
        assert all(stock_of(film.id) == 2 for film in films)
        assert order_count() == 0

    def test_film_epuise_refuse_sans_decrement(self, service, make_film, stock_of, order_count):
        """Un film epuise annule aussi les decrements des films precedents."""
        available = make_film("Alien", amount=2, price=10)
        sold_out = make_film("Brazil", amount=0, price=10)

        result = service.place_order(_candidate(available, sold_out))

        assert result.is_rejected
        assert stock_of(available.id) == 2
        assert stock_of(sold_out.id) == 0
        assert order_count() == 0

    def test_film_inconnu_refuse(self, service, make_film, stock_of, order_count):
        film = make_film(amount=2, price=20)

        result = service.place_order(Order(items=[Film(id=film.id), Film(id=uuid4())]))

        assert result.is_rejected
        assert stock_of(film.id) == 2
        assert order_count() == 0

    def test_montant_insuffisant_refuse(self, service, make_film, stock_of, order_count):
        a = make_film("Alien", amount=2, price=4)
        b = make_film("Brazil", amount=2, price=5)

        result = service.place_order(_candidate(a, b))

        assert result.is_rejected
        assert stock_of(a.id) == 2
        assert stock_of(b.id) == 2
        assert order_count() == 0

    def test_prix_fourni_par_appelant_ignore(self, service, make_film, order_count):
        """Le prix vient de la base : un prix gonfle par l'appelant ne compte pas."""
        film = make_film(amount=2, price=3)

        result = service.place_order(Order(items=[Film(id=film.id, price=100, amount=50)]))

        assert result.is_rejected
        assert order_count() == 0

    def test_commande_deja_enregistree_refusee(self, service, make_film, stock_of, order_count):
        """Une commande persistee n'est jamais mise a jour."""
        film = make_film(amount=3, price=15)
        order = _candidate(film)
        assert service.place_order(order).is_accepted

        result = service.place_order(order)

        assert result.is_rejected
        assert stock_of(film.id) == 2
        assert order_count() == 1

    def test_refus_uniforme(self, service, make_film):
        """Toutes les causes produisent le meme resultat, sans detail."""
        cheap = make_film(amount=1, price=1)
        sold_out = make_film(amount=0, price=50)

        results = [
            service.place_order(Order()),
            service.place_order(_candidate(cheap)),
            service.place_order(_candidate(sold_out)),
        ]

        assert {(r.status, r.order, r.error) for r in results} == {
            (PlacementStatus.REJECTED, None, None)
        }


# ============================================================================
# Acceptation
# ============================================================================


class TestAcceptance:
    """Commandes acceptees."""

    def test_trois_films_decrementes(self, service, make_film, stock_of, order_count):
        a = make_film("Alien", amount=2, price=5)
        b = make_film("Brazil", amount=2, price=5)
        c = make_film("Casino", amount=2, price=5)

        result = service.place_order(_candidate(a, b, c))

        assert result.is_accepted
        assert stock_of(a.id) == 1
        assert stock_of(b.id) == 1
        assert stock_of(c.id) == 1
        assert order_count() == 1

        stored = service.find(result.order.id)
        assert set(stored.items) == {a, b, c}
        assert stored.created_at.tzinfo is not None
        assert stored.created_at.utcoffset() == timedelta(0)
        assert stored.created_at == result.order.created_at

    def test_dernier_exemplaire_puis_refus(self, service, make_film, stock_of, order_count):
        """X (stock 1, prix 15) : acceptee puis refusee une fois epuise."""
        film = make_film("X", amount=1, price=15)

        first = service.place_order(_candidate(film))
        second = service.place_order(_candidate(film))

        assert first.is_accepted
        assert second.is_rejected
        assert stock_of(film.id) == 0
        assert order_count() == 1

    def test_montant_exactement_au_minimum(self, service, make_film):
        film = make_film(amount=1, price=10)
        assert service.place_order(_candidate(film)).is_accepted

    def test_commande_retournee_avec_etat_en_base(self, service, make_film):
        """La commande acceptee porte les films relus et decrementes."""
        film = make_film("Alien", amount=4, price=12)

        result = service.place_order(Order(items=[Film(id=film.id, title="?", amount=99)]))

        placed_film = result.order.items[0]
        assert placed_film.title == "Alien"
        assert placed_film.amount == 3
        assert placed_film.price == 12

    def test_id_de_commande_conserve(self, service, make_film):
        film = make_film(amount=1, price=20)
        order = _candidate(film)

        result = service.place_order(order)

        assert result.order.id == order.id
        assert service.find(order.id) is not None


# ============================================================================
# Pannes techniques
# ============================================================================


class TestInfrastructureFailure:
    """Les erreurs de la base sont converties en INFRASTRUCTURE_FAILURE."""

    def test_echec_insertion_annule_le_decrement(self, service, make_film, stock_of, order_count):
        film = make_film(amount=2, price=20)
        error = OperationalError("INSERT INTO orders", {}, Exception("disk I/O error"))

        with patch(
            "src.services.ordering.SQLModelOrderRepository.save", side_effect=error
        ):
            result = service.place_order(_candidate(film))

        assert result.status is PlacementStatus.INFRASTRUCTURE_FAILURE
        assert "disk I/O error" in result.error
        assert stock_of(film.id) == 2
        assert order_count() == 0

    def test_echec_lecture_stock(self, service, make_film, stock_of):
        film = make_film(amount=2, price=20)
        error = OperationalError("SELECT", {}, Exception("database is locked"))

        with patch(
            "src.services.ordering.SQLModelFilmRepository.find_for_update",
            side_effect=error,
        ):
            result = service.place_order(_candidate(film))

        assert result.status is PlacementStatus.INFRASTRUCTURE_FAILURE
        assert stock_of(film.id) == 2

    def test_regles_de_forme_sans_acces_base(self):
        """Une commande mal formee est refusee avant toute ouverture de session."""
        with patch("src.services.ordering.Session") as mock_session:
            result = OrderService(engine=None).place_order(Order())

        assert result.is_rejected
        mock_session.assert_not_called()


# ============================================================================
# Consultation et reservation
# ============================================================================


class TestQueries:
    """Tests pour find et find_all."""

    def test_find_inconnu(self, service):
        assert service.find(uuid4()) is None

    def test_find_all(self, service, make_film):
        a = make_film("Alien", amount=2, price=10)
        b = make_film("Brazil", amount=2, price=10)
        first = service.place_order(_candidate(a)).order
        second = service.place_order(_candidate(a, b)).order

        orders = {order.id: order for order in service.find_all()}

        assert set(orders) == {first.id, second.id}
        assert len(orders[second.id].items) == 2


class TestReserveStock:
    """Tests pour reserve_stock avec un repository simule."""

    def test_decremente_chaque_reference(self):
        film = Film(amount=2, price=5)

        class FakeRepo:
            def find_for_update(self, film_id):
                return Film(id=film.id, amount=film.amount, price=film.price)

        stock = reserve_stock(FakeRepo(), [film.id, film.id])

        assert stock[film.id].amount == 0

    def test_epuise_pendant_le_parcours(self):
        """Deux references sur un film a 1 exemplaire : refus au second passage."""
        film = Film(amount=1)

        class FakeRepo:
            def find_for_update(self, film_id):
                return Film(id=film.id, amount=film.amount)

        assert reserve_stock(FakeRepo(), [film.id, film.id]) is None

    def test_film_inconnu(self):
        class FakeRepo:
            def find_for_update(self, film_id):
                return None

        assert reserve_stock(FakeRepo(), [uuid4()]) is None
