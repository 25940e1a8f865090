"""
Tests pour les predicats de listing.
"""

from topics.core.entities import Movie, new_movie_config, with_tenancy
from topics.core.entities import movie as movies
from topics.core.ports.filters import all_of, belongs_to, is_active


def _movie(tenancy: str) -> Movie:
    return Movie(
        new_movie_config(movies.with_title("t"), movies.with_uri("u"), with_tenancy(tenancy))
    )


class TestFilters:
    """Tests de is_active, belongs_to et all_of."""

    def test_is_active(self):
        movie = _movie("a")
        assert is_active(movie)
        movie.delete()
        assert not is_active(movie)

    def test_belongs_to(self):
        assert belongs_to("a")(_movie("a"))
        assert not belongs_to("a")(_movie("b"))

    def test_all_of_without_predicates_means_no_filter(self):
        assert all_of() is None
        assert all_of(None, None) is None

    def test_all_of_single_predicate_passthrough(self):
        assert all_of(None, is_active) is is_active

    def test_all_of_combines(self):
        predicate = all_of(belongs_to("a"), is_active)
        live, deleted, other = _movie("a"), _movie("a"), _movie("b")
        deleted.delete()
        assert predicate(live)
        assert not predicate(deleted)
        assert not predicate(other)
