"""
Configuration de la base de donnees pour FilmShop.

Ce module fournit :
- Engine SQLAlchemy avec verrou d'ecriture des le debut de transaction (SQLite)
- Fonction d'initialisation des tables

La base de donnees est configuree via FILMSHOP_DATABASE_URL (defaut: sqlite:///filmshop.db).

Concurrence : deux prises de commande simultanees ne doivent jamais lire
toutes les deux un stock a 1 puis le decrementer. Avec SQLite, chaque
transaction commence par BEGIN IMMEDIATE et prend donc le verrou d'ecriture
avant la premiere lecture. Avec un serveur (PostgreSQL, MySQL), les lectures
de stock utilisent SELECT ... FOR UPDATE (voir SQLModelFilmRepository).

Les bases SQLite en memoire sont refusees : une base privee n'est visible
que d'une connexion, et une connexion partagee entre threads melange les
transactions, ce qui casse le verrou d'ecriture.
"""

from pathlib import Path

from loguru import logger
from sqlalchemy import Engine, event
from sqlmodel import SQLModel, create_engine


def is_memory_url(db_url: str) -> bool:
    """Indique si l'URL designe une base SQLite en memoire."""
    return db_url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in db_url


def _enable_immediate_transactions(engine: Engine) -> None:
    """
    Fait demarrer chaque transaction SQLite par BEGIN IMMEDIATE.

    Le driver pysqlite est place en mode autocommit pour que SQLAlchemy
    emette lui-meme l'instruction BEGIN.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_db_engine(db_url: str, timeout: float = 30.0) -> Engine:
    """
    Cree un engine configure pour FilmShop.

    Args:
        db_url: URL SQLAlchemy de la base
        timeout: Attente maximale du verrou d'ecriture SQLite, en secondes

    Returns:
        Engine pret a l'emploi (les tables ne sont pas creees)

    Raises:
        ValueError: Si l'URL designe une base SQLite en memoire
    """
    if not db_url.startswith("sqlite"):
        return create_engine(db_url, echo=False, pool_pre_ping=True)

    if is_memory_url(db_url):
        raise ValueError(
            f"Base SQLite en memoire non supportee ({db_url}), "
            "utiliser un fichier : sqlite:///chemin/vers/filmshop.db"
        )

    # Creer le repertoire parent du fichier SQLite
    db_path = Path(db_url.replace("sqlite:///", ""))
    db_path.parent.mkdir(exist_ok=True, parents=True)
    engine = create_engine(
        db_url,
        echo=False,
        connect_args={"check_same_thread": False, "timeout": timeout},
    )

    _enable_immediate_transactions(engine)
    return engine


def init_db(engine: Engine) -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Cette fonction importe les modeles pour enregistrer leurs metadonnees
    dans SQLModel.metadata, puis cree les tables correspondantes si elles
    n'existent pas deja.

    Args:
        engine: Engine cible
    """
    # Import des modeles pour enregistrer leurs metadonnees
    # L'import est fait ici pour eviter les imports circulaires
    from src.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.debug("Tables initialisees", url=str(engine.url))
