"""
Service des fichiers média.
"""

from topics.core.entities.file import FileID
from topics.core.ports.repositories import IFileRepository
from topics.services.dataclasses import FileInfo


class FileService:
    """Lecture des fichiers média, rattachés aux films par référence faible."""

    def __init__(self, file_repo: IFileRepository) -> None:
        self._file_repo = file_repo

    def list_files_by_movie(self, movie_id: str) -> list[FileInfo]:
        """
        Liste les fichiers d'un film.

        Un MovieID inconnu n'est pas une erreur : la liste est simplement vide.
        """
        return [
            FileInfo.from_entity(media)
            for media in self._file_repo.list(lambda media: media.movie_id == movie_id)
        ]

    def get_file(self, file_id: str) -> FileInfo:
        """Retourne la vue d'un fichier. Lève NotFoundError si absent."""
        return FileInfo.from_entity(self._file_repo.find_by_id(FileID(file_id)))
