"""
Tests pour les repositories en memoire.

Verifie le contrat commun save / find_by_id / list, l'isolation des
instantanes et la surete sous acces concurrents.
"""

import threading

import pytest

from topics.core.entities import Movie, new_movie_config, with_tenancy
from topics.core.entities import movie as movies
from topics.core.errors import NotFoundError
from topics.core.ports.filters import is_active
from topics.infrastructure.memory import InMemoryMovieRepository


def _movie(title: str = "John Wick") -> Movie:
    return Movie(
        new_movie_config(
            movies.with_title(title),
            movies.with_uri("uri-example"),
            with_tenancy("tenancy/test"),
        )
    )


class TestInMemoryRepositoryContract:
    """Tests du contrat IRepository."""

    def test_save_then_find_round_trip(self, movie_repo):
        movie = _movie()
        movie_repo.save(movie)

        found = movie_repo.find_by_id(movie.id)

        assert found == movie
        assert found.title == movie.title
        assert found.uri == movie.uri
        assert found.tenancy == movie.tenancy
        assert found.created_at == movie.created_at
        assert found.deleted_at is None

    def test_find_unknown_raises_not_found(self, movie_repo):
        with pytest.raises(NotFoundError) as exc_info:
            movie_repo.find_by_id("inconnu")
        assert exc_info.value.entity == "Movie"
        assert exc_info.value.entity_id == "inconnu"

    def test_deleted_entity_still_found(self, movie_repo):
        movie = _movie()
        movie.delete()
        movie_repo.save(movie)

        found = movie_repo.find_by_id(movie.id)

        assert found.deleted_at == movie.deleted_at

    def test_save_is_idempotent_upsert(self, movie_repo):
        movie = _movie()
        movie_repo.save(movie)
        movie_repo.save(movie)
        assert len(movie_repo) == 1

    def test_unsaved_mutation_does_not_reach_store(self, movie_repo):
        """Un delete() sans save n'est pas persiste."""
        movie = _movie()
        movie_repo.save(movie)

        found = movie_repo.find_by_id(movie.id)
        found.delete()

        assert movie_repo.find_by_id(movie.id).deleted_at is None

    def test_list_keeps_insertion_order(self, movie_repo):
        saved = [_movie(f"film {i}") for i in range(5)]
        for movie in saved:
            movie_repo.save(movie)
        # Une mise a jour ne deplace pas l'entite
        saved[0].delete()
        movie_repo.save(saved[0])

        assert [m.id for m in movie_repo.list()] == [m.id for m in saved]

    def test_list_with_predicate(self, movie_repo):
        live, deleted = _movie("live"), _movie("deleted")
        deleted.delete()
        movie_repo.save(live)
        movie_repo.save(deleted)

        assert [m.title for m in movie_repo.list(is_active)] == ["live"]
        assert len(movie_repo.list()) == 2

    def test_list_empty_store(self, movie_repo):
        assert movie_repo.list() == []


class TestInMemoryRepositoryConcurrency:
    """Tests des acces concurrents au store partage."""

    def test_concurrent_saves_and_reads(self):
        repo = InMemoryMovieRepository()
        errors: list[Exception] = []

        def worker(index: int) -> None:
            try:
                for i in range(50):
                    movie = _movie(f"{index}-{i}")
                    repo.save(movie)
                    assert repo.find_by_id(movie.id).title == f"{index}-{i}"
                    repo.list(is_active)
            except Exception as exc:  # pragma: no cover - remonte via errors
                errors.append(exc)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert len(repo) == 8 * 50
