"""
Service des films.

Orchestre l'agrégat Movie + File :
- Enregistrement d'un film et du fichier portant son média
- Suppression logique du film, propagée à ses fichiers
- Lecture, listing et résolution du média à télécharger
"""

from typing import Optional

from loguru import logger

from topics.core.entities import file as files
from topics.core.entities import movie as movies
from topics.core.entities.config import with_tenancy
from topics.core.entities.movie import MovieID
from topics.core.errors import NotFoundError
from topics.core.events import MovieRegistered
from topics.core.ports.events import IEventPublisher
from topics.core.ports.filters import all_of, belongs_to, is_active
from topics.core.ports.repositories import IFileRepository, IMovieRepository
from topics.services.dataclasses import FileInfo, MovieInfo


class MovieService:
    """
    Service applicatif de l'agrégat Movie.

    Attributs injectes:
        movie_repo: Repository des films
        file_repo: Repository des fichiers media
        event_publisher: Puits d'evenements (optionnel)
    """

    def __init__(
        self,
        movie_repo: IMovieRepository,
        file_repo: IFileRepository,
        event_publisher: Optional[IEventPublisher] = None,
    ) -> None:
        self._movie_repo = movie_repo
        self._file_repo = file_repo
        self._event_publisher = event_publisher

    def register_movie(self, title: str, uri: str, tenancy: str) -> MovieID:
        """
        Enregistre un nouveau film et le fichier de son média.

        Args:
            title: Titre du film
            uri: Référence vers le média sous-jacent
            tenancy: Tenant propriétaire

        Returns:
            L'identifiant du film créé

        Raises:
            ValidationError: Si un ou plusieurs champs sont invalides
            RepositoryError: Si la persistance échoue
        """
        logger.info("Enregistrement du film", title=title, tenancy=tenancy)
        movie = movies.Movie(
            movies.new_movie_config(
                movies.with_title(title),
                movies.with_uri(uri),
                with_tenancy(tenancy),
            )
        )
        media = files.File(
            files.new_file_config(
                files.with_movie_id(movie.id),
                files.with_uri(uri),
                with_tenancy(tenancy),
            )
        )

        self._movie_repo.save(movie)
        self._file_repo.save(media)

        if self._event_publisher is not None:
            self._event_publisher.publish(
                MovieRegistered(
                    id=movie.id,
                    title=movie.title,
                    uri=movie.uri,
                    tenancy=movie.tenancy,
                )
            )
        logger.info("Film enregistre", id=movie.id)
        return movie.id

    def delete_movie(self, movie_id: str) -> None:
        """
        Supprime logiquement un film et ses fichiers.

        Idempotent : un film déjà supprimé conserve sa date de suppression.

        Raises:
            NotFoundError: Si le film n'existe pas
        """
        logger.info("Suppression du film", id=movie_id)
        movie = self._movie_repo.find_by_id(MovieID(movie_id))
        movie.delete()
        self._movie_repo.save(movie)

        for media in self._file_repo.list(all_of(_of_movie(movie.id), is_active)):
            media.delete()
            self._file_repo.save(media)
        logger.info("Film supprime", id=movie_id, deleted_at=movie.deleted_at)

    def get_movie(self, movie_id: str) -> MovieInfo:
        """Retourne la vue d'un film, suppression comprise."""
        return MovieInfo.from_entity(self._movie_repo.find_by_id(MovieID(movie_id)))

    def list_movies(
        self, tenancy: Optional[str] = None, active_only: bool = False
    ) -> list[MovieInfo]:
        """
        Liste les films.

        Sans filtre, les films supprimés sont inclus avec leur date de
        suppression.

        Args:
            tenancy: Restreint au tenant donné
            active_only: Exclut les films supprimés
        """
        predicate = all_of(
            belongs_to(tenancy) if tenancy else None,
            is_active if active_only else None,
        )
        return [MovieInfo.from_entity(movie) for movie in self._movie_repo.list(predicate)]

    def download_movie(self, movie_id: str) -> FileInfo:
        """
        Résout le fichier portant le média d'un film.

        Un fichier actif est préféré ; à défaut, le fichier supprimé reste
        résolu (suppression logique).

        Raises:
            NotFoundError: Si le film, ou tout fichier associé, est absent
        """
        movie = self._movie_repo.find_by_id(MovieID(movie_id))
        candidates = self._file_repo.list(_of_movie(movie.id))
        if not candidates:
            raise NotFoundError("File", movie.id)

        active = [media for media in candidates if not media.is_deleted]
        media = (active or candidates)[0]
        logger.debug("Media resolu", movie_id=movie.id, file_id=media.id, uri=media.uri)
        return FileInfo.from_entity(media)


def _of_movie(movie_id: str):
    """Prédicat : le fichier référence le film donné."""

    def predicate(media: files.File) -> bool:
        return media.movie_id == movie_id

    return predicate
