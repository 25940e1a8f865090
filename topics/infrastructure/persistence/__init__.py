"""
Module de persistance SQLite pour Topics.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Configuration de l'engine, initialisation des tables
- models.py : Modeles SQLModel representant les tables
- repositories/ : Implementations des ports repository

Les modeles ici sont des adapters de persistance, distincts des entites de
domaine (core/entities/). La conversion entre les deux se fait dans les
repositories.
"""

from topics.infrastructure.persistence.database import (
    create_db_engine,
    init_db,
)
from topics.infrastructure.persistence.models import (
    FileModel,
    MessageModel,
    MovieModel,
    UserModel,
)

__all__ = [
    "create_db_engine",
    "init_db",
    "UserModel",
    "MovieModel",
    "FileModel",
    "MessageModel",
]
