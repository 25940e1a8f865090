"""
Vues en lecture retournées par les services.

Projections immuables des entités : elles exposent le statut de
suppression (deleted_at) sans permettre de muter l'entité.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from topics.core.entities import File, Message, Movie, User


@dataclass(frozen=True)
class UserInfo:
    id: str
    email: str
    first_name: str
    last_name: str
    tenancy: str
    created_at: datetime
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserInfo":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            tenancy=user.tenancy,
            created_at=user.created_at,
            deleted_at=user.deleted_at,
        )


@dataclass(frozen=True)
class MovieInfo:
    id: str
    title: str
    uri: str
    tenancy: str
    created_at: datetime
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, movie: Movie) -> "MovieInfo":
        return cls(
            id=movie.id,
            title=movie.title,
            uri=movie.uri,
            tenancy=movie.tenancy,
            created_at=movie.created_at,
            deleted_at=movie.deleted_at,
        )


@dataclass(frozen=True)
class FileInfo:
    id: str
    movie_id: str
    uri: str
    tenancy: str
    created_at: datetime
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, file: File) -> "FileInfo":
        return cls(
            id=file.id,
            movie_id=file.movie_id,
            uri=file.uri,
            tenancy=file.tenancy,
            created_at=file.created_at,
            deleted_at=file.deleted_at,
        )


@dataclass(frozen=True)
class MessageInfo:
    """Message tel qu'affiché dans un canal, suppression comprise."""

    id: str
    author_id: str
    channel_id: str
    content: str
    tenancy: str
    created_at: datetime
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, message: Message) -> "MessageInfo":
        return cls(
            id=message.id,
            author_id=message.author_id,
            channel_id=message.channel_id,
            content=message.content,
            tenancy=message.tenancy,
            created_at=message.created_at,
            deleted_at=message.deleted_at,
        )
