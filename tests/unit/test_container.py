"""
Tests du Container DI : selection du backend de stockage.
"""

import threading

from dependency_injector import providers

from topics.container import Container
from topics.infrastructure.memory import InMemoryMovieRepository
from topics.infrastructure.persistence.repositories import SQLModelMovieRepository


class TestContainer:
    """Tests de l'assemblage des dependances."""

    def test_memory_backend_shares_store(self, test_settings):
        container = Container()
        container.config.override(providers.Object(test_settings))

        assert isinstance(container.movie_repository(), InMemoryMovieRepository)
        assert container.movie_repository() is container.movie_repository()

        movie_id = container.movie_service().register_movie("John Wick", "uri", "t")
        assert container.movie_service().get_movie(movie_id).title == "John Wick"

    def test_sqlite_backend(self, test_settings):
        settings = test_settings.model_copy(
            update={"storage_backend": "sqlite", "database_url": "sqlite://"}
        )
        container = Container()
        container.config.override(providers.Object(settings))
        container.database.init()
        try:
            assert isinstance(container.movie_repository(), SQLModelMovieRepository)
            movie_id = container.movie_service().register_movie("John Wick", "uri", "t")
            files = container.file_service().list_files_by_movie(movie_id)
            assert [f.uri for f in files] == ["uri"]
        finally:
            container.shutdown_resources()

    def test_sqlite_backend_concurrent_registrations(self, test_settings):
        settings = test_settings.model_copy(
            update={"storage_backend": "sqlite", "database_url": "sqlite://"}
        )
        container = Container()
        container.config.override(providers.Object(settings))
        container.database.init()
        errors: list[BaseException] = []

        def worker(index: int) -> None:
            try:
                service = container.movie_service()
                for i in range(20):
                    movie_id = service.register_movie(f"{index}-{i}", f"uri-{index}-{i}", "t")
                    assert service.download_movie(movie_id).uri == f"uri-{index}-{i}"
            except BaseException as exc:  # pragma: no cover - remonte via errors
                errors.append(exc)

        try:
            threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

            assert errors == []
            movies = container.movie_service().list_movies()
            assert len(movies) == 8 * 20
            file_service = container.file_service()
            assert all(len(file_service.list_files_by_movie(m.id)) == 1 for m in movies)
        finally:
            container.shutdown_resources()
