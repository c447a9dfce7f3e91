"""
Tests des routes HTTP (films et commandes).

L'application est construite avec un Container dont l'engine est
remplace par la base temporaire du test.
"""

from unittest.mock import patch
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from src.container import Container
from src.core.value_objects.placement import PlacementResult
from src.web.app import create_app


@pytest.fixture
def client(engine):
    container = Container()
    container.engine.override(engine)
    with TestClient(create_app(container)) as test_client:
        yield test_client
    container.engine.reset_override()


# ============================================================================
# Films
# ============================================================================


class TestFilmRoutes:
    """Tests des routes /films."""

    def test_liste_vide(self, client):
        resp = client.get("/films")
        assert resp.status_code == 200
        assert resp.json() == []

    def test_ajout_puis_lecture(self, client):
        resp = client.post(
            "/films",
            json={"title": "Heat", "director": "Michael Mann", "amount": 2, "price": 14},
        )
        assert resp.status_code == 201
        film_id = resp.json()["id"]
        assert resp.headers["location"].endswith(f"/films/{film_id}")

        detail = client.get(f"/films/{film_id}")
        assert detail.status_code == 200
        assert detail.json()["title"] == "Heat"
        assert detail.json()["amount"] == 2

    def test_ajout_id_existant_409(self, client, make_film):
        film = make_film("Alien")
        resp = client.post("/films", json={"id": str(film.id), "title": "Autre"})
        assert resp.status_code == 409

    def test_ajout_stock_negatif_invalide(self, client):
        resp = client.post("/films", json={"title": "Heat", "amount": -1})
        assert resp.status_code == 422

    def test_film_inconnu_404(self, client):
        assert client.get(f"/films/{uuid4()}").status_code == 404

    def test_mise_a_jour(self, client, make_film, stock_of):
        film = make_film("Alien", amount=1, price=9)
        resp = client.put(f"/films/{film.id}", json={"title": "Alien", "amount": 6, "price": 9})
        assert resp.status_code == 200
        assert stock_of(film.id) == 6

    def test_mise_a_jour_inconnu_404(self, client):
        resp = client.put(f"/films/{uuid4()}", json={"title": "Fantome"})
        assert resp.status_code == 404


# ============================================================================
# Commandes
# ============================================================================


class TestOrderRoutes:
    """Tests des routes /orders."""

    def test_commande_acceptee_201(self, client, make_film, stock_of):
        film = make_film("X", amount=1, price=15)

        resp = client.post("/orders", json={"items": [{"id": str(film.id)}]})

        assert resp.status_code == 201
        body = resp.json()
        assert resp.headers["location"].endswith(f"/orders/{body['id']}")
        assert body["items"][0]["title"] == "X"
        assert body["created_at"] is not None
        assert stock_of(film.id) == 0

    def test_commande_refusee_422(self, client, make_film, stock_of):
        film = make_film("X", amount=0, price=15)

        resp = client.post("/orders", json={"items": [{"id": str(film.id)}]})

        assert resp.status_code == 422
        assert resp.json()["detail"] == "Commande refusée"

    def test_commande_vide_422(self, client):
        assert client.post("/orders", json={"items": []}).status_code == 422

    def test_panne_technique_500(self, client, make_film):
        film = make_film("X", amount=1, price=15)
        with patch(
            "src.services.ordering.OrderService.place_order",
            return_value=PlacementResult.failed("database is locked"),
        ):
            resp = client.post("/orders", json={"items": [{"id": str(film.id)}]})
        assert resp.status_code == 500

    def test_liste_et_detail(self, client, make_film):
        film = make_film("X", amount=2, price=15)
        order_id = client.post("/orders", json={"items": [{"id": str(film.id)}]}).json()["id"]

        listing = client.get("/orders")
        assert listing.status_code == 200
        assert [order["id"] for order in listing.json()] == [order_id]

        detail = client.get(f"/orders/{order_id}")
        assert detail.status_code == 200
        assert detail.json()["items"][0]["id"] == str(film.id)

    def test_commande_inconnue_404(self, client):
        assert client.get(f"/orders/{uuid4()}").status_code == 404
