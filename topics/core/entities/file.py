"""
Entité File.

Fichier média rattaché à un film par une référence faible (MovieID) :
aucune contrainte d'existence, la résolution passe par le repository.
"""

from dataclasses import dataclass
from typing import ClassVar, NewType

from topics.core.entities.base import Entity
from topics.core.entities.config import EntityConfig, Option, build_config, required
from topics.core.entities.movie import MovieID

FileID = NewType("FileID", str)


@dataclass
class FileConfig(EntityConfig):
    movie_id: str = ""
    uri: str = ""

    required_fields: ClassVar[tuple[str, ...]] = ("movie_id", "uri")


def with_movie_id(movie_id: str) -> Option:
    return required("movie_id", movie_id)


def with_uri(uri: str) -> Option:
    return required("uri", uri)


def new_file_config(*options: Option) -> FileConfig:
    """Construit une configuration de fichier validée (lève ValidationError)."""
    return build_config(FileConfig(), options)


class File(Entity[FileID]):
    """Fichier média d'un film."""

    def __init__(self, config: FileConfig) -> None:
        super().__init__(config)
        self._movie_id = MovieID(config.movie_id)
        self._uri = config.uri

    @property
    def movie_id(self) -> MovieID:
        return self._movie_id

    @property
    def uri(self) -> str:
        return self._uri
