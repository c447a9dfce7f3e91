"""
Fixtures pytest partagees pour les tests FilmShop.

Ce module contient les fixtures communes utilisees dans les tests:
- Engine SQLite sur disque (repertoire temporaire) avec tables creees
- Fabrique de films en base et lecture du stock
"""

from pathlib import Path
from typing import Callable, Iterator
from uuid import UUID

import pytest
from sqlalchemy import Engine, func
from sqlmodel import Session, select

from src.config import Settings
from src.core.entities.shop import Film
from src.infrastructure.persistence.database import create_db_engine, init_db
from src.infrastructure.persistence.models import FilmModel, OrderModel


@pytest.fixture
def engine(tmp_path: Path) -> Iterator[Engine]:
    """Engine SQLite sur disque, tables creees, partageable entre threads."""
    engine = create_db_engine(f"sqlite:///{tmp_path}/shop.db", timeout=10)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def make_film(engine: Engine) -> Callable[..., Film]:
    """
    Fabrique de films persistes dans l'engine du test.

    Usage:
        film = make_film("Alien", amount=2, price=5)
    """

    def make_film(
        title: str = "Le Samourai",
        amount: int = 1,
        price: int = 15,
        **kwargs,
    ) -> Film:
        model = FilmModel(title=title, amount=amount, price=price, **kwargs)
        film_id = model.id
        with Session(engine) as session:
            session.add(model)
            session.commit()
        return Film(id=film_id, title=title, amount=amount, price=price, **kwargs)

    return make_film


def read_amount(engine: Engine, film_id: UUID) -> int:
    """Lit le stock courant d'un film dans une session fraiche."""
    with Session(engine) as session:
        return session.get(FilmModel, film_id).amount


def count_orders(engine: Engine) -> int:
    """Nombre de commandes enregistrees."""
    with Session(engine) as session:
        return session.exec(select(func.count()).select_from(OrderModel)).one()


@pytest.fixture
def stock_of(engine: Engine) -> Callable[[UUID], int]:
    """Lecture du stock d'un film dans l'engine du test."""
    return lambda film_id: read_amount(engine, film_id)


@pytest.fixture
def order_count(engine: Engine) -> Callable[[], int]:
    """Lecture du nombre de commandes dans l'engine du test."""
    return lambda: count_orders(engine)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec base et logs dans un repertoire temporaire."""
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        database_timeout=5,
        log_file=tmp_path / "test.log",
    )
