"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Le backend des repositories (memoire ou SQLModel) est choisi par
Settings.storage_backend.
"""

import threading

from dependency_injector import containers, providers
from sqlmodel import Session

from .adapters.events import LoggingEventPublisher
from .config import Settings
from .infrastructure.memory import (
    InMemoryFileRepository,
    InMemoryMessageRepository,
    InMemoryMovieRepository,
    InMemoryUserRepository,
)
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.repositories import (
    SQLModelFileRepository,
    SQLModelMessageRepository,
    SQLModelMovieRepository,
    SQLModelUserRepository,
)
from .services import FileService, MessagesService, MovieService, UserService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Seulement pour le backend sqlite
        movie_service = container.movie_service()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - engine unique, Resource pour creer les tables une fois
    engine = providers.ThreadSafeSingleton(
        create_db_engine,
        database_url=config.provided.database_url,
    )
    database = providers.Resource(init_db, engine=engine)

    # Session SQLModel unique, partagee par les repositories sous un meme verrou
    session = providers.ThreadSafeSingleton(Session, engine)
    session_lock = providers.ThreadSafeSingleton(threading.Lock)

    # Repositories - Singletons thread-safe : le store memoire doit etre partage
    user_repository = providers.Selector(
        config.provided.storage_backend,
        memory=providers.ThreadSafeSingleton(InMemoryUserRepository),
        sqlite=providers.ThreadSafeSingleton(
            SQLModelUserRepository, session=session, lock=session_lock
        ),
    )
    movie_repository = providers.Selector(
        config.provided.storage_backend,
        memory=providers.ThreadSafeSingleton(InMemoryMovieRepository),
        sqlite=providers.ThreadSafeSingleton(
            SQLModelMovieRepository, session=session, lock=session_lock
        ),
    )
    file_repository = providers.Selector(
        config.provided.storage_backend,
        memory=providers.ThreadSafeSingleton(InMemoryFileRepository),
        sqlite=providers.ThreadSafeSingleton(
            SQLModelFileRepository, session=session, lock=session_lock
        ),
    )
    message_repository = providers.Selector(
        config.provided.storage_backend,
        memory=providers.ThreadSafeSingleton(InMemoryMessageRepository),
        sqlite=providers.ThreadSafeSingleton(
            SQLModelMessageRepository, session=session, lock=session_lock
        ),
    )

    # Puits d'evenements - logs loguru en attendant un bus
    event_publisher = providers.Singleton(LoggingEventPublisher)

    # Services (stateless - Factory)
    user_service = providers.Factory(
        UserService,
        user_repo=user_repository,
        event_publisher=event_publisher,
    )
    movie_service = providers.Factory(
        MovieService,
        movie_repo=movie_repository,
        file_repo=file_repository,
        event_publisher=event_publisher,
    )
    file_service = providers.Factory(
        FileService,
        file_repo=file_repository,
    )
    messages_service = providers.Factory(
        MessagesService,
        message_repo=message_repository,
        event_publisher=event_publisher,
        default_tenancy=config.provided.default_tenancy,
    )
