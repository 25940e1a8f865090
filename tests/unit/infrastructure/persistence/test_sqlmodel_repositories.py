"""
Tests pour les repositories SQLModel (SQLite en memoire).

Les repositories SQLModel doivent satisfaire le meme contrat que les
repositories en memoire, dates d'audit comprises.
"""

import threading
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from topics.core.entities import (
    File,
    Message,
    Movie,
    User,
    new_file_config,
    new_message_config,
    new_movie_config,
    new_user_config,
    with_tenancy,
)
from topics.core.entities import file as files
from topics.core.entities import message as messages
from topics.core.entities import movie as movies
from topics.core.entities import user as users
from topics.core.errors import NotFoundError, RepositoryError, ValidationError
from topics.core.ports.filters import is_active
from topics.infrastructure.persistence.models import MovieModel
from topics.infrastructure.persistence.repositories import (
    SQLModelFileRepository,
    SQLModelMessageRepository,
    SQLModelMovieRepository,
    SQLModelUserRepository,
)

TENANCY = "tenancy/test"


def _movie(title: str = "John Wick") -> Movie:
    return Movie(
        new_movie_config(
            movies.with_title(title),
            movies.with_uri("uri-example"),
            with_tenancy(TENANCY),
        )
    )


class TestSQLModelMovieRepository:
    """Tests du contrat IRepository sur la table movies."""

    def test_save_then_find_round_trip(self, sql_session):
        repo = SQLModelMovieRepository(sql_session)
        movie = _movie()
        repo.save(movie)

        found = repo.find_by_id(movie.id)

        assert found == movie
        assert found.title == "John Wick"
        assert found.uri == "uri-example"
        assert found.tenancy == TENANCY
        assert found.created_at == movie.created_at
        assert found.created_at.tzinfo is not None
        assert found.deleted_at is None

    def test_find_unknown_raises_not_found(self, sql_session):
        repo = SQLModelMovieRepository(sql_session)
        with pytest.raises(NotFoundError):
            repo.find_by_id("inconnu")

    def test_delete_persisted_after_resave(self, sql_session):
        repo = SQLModelMovieRepository(sql_session)
        movie = _movie()
        repo.save(movie)

        movie.delete()
        repo.save(movie)

        found = repo.find_by_id(movie.id)
        assert found.deleted_at == movie.deleted_at
        assert repo.list(is_active) == []
        assert len(repo.list()) == 1

    def test_list_ordered_by_creation(self, sql_session):
        repo = SQLModelMovieRepository(sql_session)
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        saved = [
            Movie(
                movies.MovieConfig(
                    tenancy=TENANCY,
                    created_at=base + timedelta(minutes=i),
                    title=f"film {i}",
                    uri="uri-example",
                )
            )
            for i in range(3)
        ]
        for movie in reversed(saved):
            repo.save(movie)

        assert [m.title for m in repo.list()] == ["film 0", "film 1", "film 2"]

    def test_store_failure_raises_repository_error(self):
        session = MagicMock()
        session.merge.side_effect = OperationalError("INSERT", {}, Exception("disk full"))
        repo = SQLModelMovieRepository(session)

        with pytest.raises(RepositoryError):
            repo.save(_movie())
        session.rollback.assert_called_once()


class TestSQLModelOtherRepositories:
    """Aller-retour des autres entites."""

    def test_user_round_trip(self, sql_session):
        repo = SQLModelUserRepository(sql_session)
        user = User(
            new_user_config(
                users.with_email("john@doe.com"),
                users.with_first_name("john"),
                users.with_last_name("doe"),
                with_tenancy(TENANCY),
            )
        )
        repo.save(user)

        found = repo.find_by_id(user.id)

        assert (found.email, found.first_name, found.last_name) == ("john@doe.com", "john", "doe")

    def test_file_round_trip_with_dangling_movie(self, sql_session):
        """La reference vers le film n'est pas une cle etrangere."""
        repo = SQLModelFileRepository(sql_session)
        media = File(
            new_file_config(
                files.with_movie_id("film-inexistant"),
                files.with_uri("uri-example"),
                with_tenancy(TENANCY),
            )
        )
        repo.save(media)

        assert repo.find_by_id(media.id).movie_id == "film-inexistant"

    def test_message_round_trip_deleted(self, sql_session):
        repo = SQLModelMessageRepository(sql_session)
        message = Message(
            new_message_config(
                messages.with_author_id("user-1"),
                messages.with_channel_id("general"),
                messages.with_content("hello"),
                with_tenancy(TENANCY),
            )
        )
        message.delete()
        repo.save(message)

        found = repo.find_by_id(message.id)

        assert found.content == "hello"
        assert found.deleted_at == message.deleted_at

    def test_invalid_stored_row_rejected_on_read(self, sql_session):
        sql_session.add(
            MovieModel(
                id="sans-tenant",
                tenancy="",
                created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
                title="John Wick",
                uri="uri-example",
            )
        )
        sql_session.commit()
        repo = SQLModelMovieRepository(sql_session)

        with pytest.raises(ValidationError):
            repo.find_by_id("sans-tenant")


class TestSQLModelRepositoryConcurrency:
    """Repositories partageant une session et un verrou, sous acces concurrents."""

    def test_concurrent_saves_across_repositories(self, sql_session):
        lock = threading.Lock()
        movie_repo = SQLModelMovieRepository(sql_session, lock=lock)
        file_repo = SQLModelFileRepository(sql_session, lock=lock)
        errors: list[BaseException] = []

        def worker(index: int) -> None:
            try:
                for i in range(25):
                    movie = _movie(f"{index}-{i}")
                    movie_repo.save(movie)
                    file_repo.save(
                        File(
                            new_file_config(
                                files.with_movie_id(movie.id),
                                files.with_uri(movie.uri),
                                with_tenancy(TENANCY),
                            )
                        )
                    )
                    assert movie_repo.find_by_id(movie.id).title == f"{index}-{i}"
                    file_repo.list(is_active)
            except BaseException as exc:  # pragma: no cover - remonte via errors
                errors.append(exc)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert len(movie_repo.list()) == 8 * 25
        assert len(file_repo.list()) == 8 * 25
