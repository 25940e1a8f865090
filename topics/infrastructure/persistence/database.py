"""
Configuration de la base de donnees SQLite pour Topics.

Ce module fournit :
- Engine SQLite avec configuration pour multi-thread
- Fonction d'initialisation des tables

L'engine est construit par le container a partir de TOPICS_DATABASE_URL
(defaut: sqlite:///topics.db).
"""

from pathlib import Path

from loguru import logger
from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine


def create_db_engine(database_url: str) -> Engine:
    """
    Cree un engine SQLModel pour l'URL donnee.

    Les bases SQLite en memoire partagent une connexion unique (StaticPool)
    pour que toutes les sessions voient les memes tables.
    """
    connect_args: dict = {}
    kwargs: dict = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        else:
            db_path = Path(database_url.replace("sqlite:///", ""))
            db_path.parent.mkdir(exist_ok=True, parents=True)

    return create_engine(database_url, echo=False, connect_args=connect_args, **kwargs)


def init_db(engine: Engine) -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Importe les modeles pour enregistrer leurs metadonnees dans
    SQLModel.metadata, puis cree les tables manquantes.
    """
    from topics.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.debug("Tables initialisees", url=str(engine.url))
