"""
Implementation SQLModel du repository Movie.
"""

from topics.core.entities import Movie, MovieConfig, MovieID
from topics.core.ports.repositories import IMovieRepository
from topics.infrastructure.persistence.models import MovieModel
from topics.infrastructure.persistence.repositories.base import SQLModelRepository, as_utc


class SQLModelMovieRepository(SQLModelRepository[Movie, MovieID, MovieModel], IMovieRepository):
    """Repository SQLModel pour les films."""

    entity_name = "Movie"
    model = MovieModel

    def _to_entity(self, model: MovieModel) -> Movie:
        return Movie(
            MovieConfig(
                id=model.id,
                tenancy=model.tenancy,
                created_at=as_utc(model.created_at),
                deleted_at=as_utc(model.deleted_at),
                title=model.title,
                uri=model.uri,
            )
        )

    def _to_model(self, entity: Movie) -> MovieModel:
        return MovieModel(
            id=entity.id,
            tenancy=entity.tenancy,
            created_at=entity.created_at,
            deleted_at=entity.deleted_at,
            title=entity.title,
            uri=entity.uri,
        )
