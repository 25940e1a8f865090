"""
Fixtures pytest partagees pour les tests Topics.

Ce module contient les fixtures communes utilisees dans les tests:
- Repositories en memoire et SQLModel (SQLite en memoire)
- Puits d'evenements enregistreur
- Services assembles sur ces repositories
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from typing import Iterator

import pytest
from sqlmodel import Session, SQLModel

from topics.adapters.events import RecordingEventPublisher
from topics.config import Settings
from topics.infrastructure.memory import (
    InMemoryFileRepository,
    InMemoryMessageRepository,
    InMemoryMovieRepository,
    InMemoryUserRepository,
)
from topics.infrastructure.persistence.database import create_db_engine, init_db
from topics.services import FileService, MessagesService, MovieService, UserService

TENANCY = "tenancy/test"


@pytest.fixture
def movie_repo() -> InMemoryMovieRepository:
    return InMemoryMovieRepository()


@pytest.fixture
def file_repo() -> InMemoryFileRepository:
    return InMemoryFileRepository()


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def message_repo() -> InMemoryMessageRepository:
    return InMemoryMessageRepository()


@pytest.fixture
def event_publisher() -> RecordingEventPublisher:
    """Puits d'evenements qui conserve les evenements publies."""
    return RecordingEventPublisher()


@pytest.fixture
def movie_service(movie_repo, file_repo, event_publisher) -> MovieService:
    return MovieService(
        movie_repo=movie_repo,
        file_repo=file_repo,
        event_publisher=event_publisher,
    )


@pytest.fixture
def file_service(file_repo) -> FileService:
    return FileService(file_repo=file_repo)


@pytest.fixture
def user_service(user_repo, event_publisher) -> UserService:
    return UserService(user_repo=user_repo, event_publisher=event_publisher)


@pytest.fixture
def messages_service(message_repo, event_publisher) -> MessagesService:
    return MessagesService(
        message_repo=message_repo,
        event_publisher=event_publisher,
        default_tenancy=TENANCY,
    )


@pytest.fixture
def sql_session() -> Iterator[Session]:
    """
    Session SQLModel sur une base SQLite en memoire.

    Les tables sont creees puis detruites pour chaque test.
    """
    engine = create_db_engine("sqlite://")
    init_db(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler la base et les logs de chaque test.
    """
    return Settings(
        storage_backend="memory",
        database_url=f"sqlite:///{tmp_path}/test.db",
        default_tenancy=TENANCY,
        log_file=tmp_path / "test.log",
        events_file=tmp_path / "events.log",
    )
