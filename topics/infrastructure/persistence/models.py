"""
Modeles SQLModel pour la base de donnees Topics.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (core/entities/)
selon l'architecture hexagonale.

Tables:
- users: Utilisateurs
- movies: Films
- files: Fichiers media (reference faible vers movies.id)
- messages: Messages de canaux (reference faible vers users.id)

Chaque table porte les colonnes d'audit (created_at, deleted_at) et le
tenant. La suppression est logique : deleted_at renseigne, ligne conservee.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


class AuditColumns(SQLModel):
    """Colonnes communes : identifiant, tenant et piste d'audit."""

    id: str = Field(primary_key=True)
    tenancy: str = Field(index=True)
    created_at: datetime = Field(sa_type=DateTime(timezone=True), nullable=False)
    deleted_at: datetime | None = Field(
        default=None, sa_type=DateTime(timezone=True), nullable=True
    )


class UserModel(AuditColumns, table=True):
    """Modele representant un utilisateur."""

    __tablename__ = "users"

    email: str = Field(index=True)
    first_name: str = ""
    last_name: str = ""


class MovieModel(AuditColumns, table=True):
    """Modele representant un film."""

    __tablename__ = "movies"

    title: str = Field(index=True)
    uri: str


class FileModel(AuditColumns, table=True):
    """
    Modele representant un fichier media.

    movie_id n'est pas une cle etrangere : la reference est faible et un
    film absent est tolere.
    """

    __tablename__ = "files"

    movie_id: str = Field(index=True)
    uri: str


class MessageModel(AuditColumns, table=True):
    """Modele representant un message de canal."""

    __tablename__ = "messages"

    author_id: str = Field(index=True)
    channel_id: str = Field(index=True)
    content: str
