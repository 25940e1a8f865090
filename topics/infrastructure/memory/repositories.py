"""
Repositories en mémoire par type d'entité.
"""

from topics.core.entities import (
    File,
    FileID,
    Message,
    MessageID,
    Movie,
    MovieID,
    User,
    UserID,
)
from topics.core.ports.repositories import (
    IFileRepository,
    IMessageRepository,
    IMovieRepository,
    IUserRepository,
)
from topics.infrastructure.memory.repository import InMemoryRepository


class InMemoryUserRepository(InMemoryRepository[User, UserID], IUserRepository):
    entity_name = "User"


class InMemoryMovieRepository(InMemoryRepository[Movie, MovieID], IMovieRepository):
    entity_name = "Movie"


class InMemoryFileRepository(InMemoryRepository[File, FileID], IFileRepository):
    entity_name = "File"


class InMemoryMessageRepository(InMemoryRepository[Message, MessageID], IMessageRepository):
    entity_name = "Message"
