"""
Entité Movie.

Un film référence son média sous-jacent par URI. Les fichiers physiques
(File) le référencent à leur tour par MovieID, sans lien objet.
"""

from dataclasses import dataclass
from typing import ClassVar, NewType

from topics.core.entities.base import Entity
from topics.core.entities.config import EntityConfig, Option, build_config, required

MovieID = NewType("MovieID", str)


@dataclass
class MovieConfig(EntityConfig):
    """Configuration d'un film : titre et URI du média sont obligatoires."""

    title: str = ""
    uri: str = ""

    required_fields: ClassVar[tuple[str, ...]] = ("title", "uri")


def with_title(title: str) -> Option:
    return required("title", title)


def with_uri(uri: str) -> Option:
    return required("uri", uri)


def new_movie_config(*options: Option) -> MovieConfig:
    """Construit une configuration de film validée (lève ValidationError)."""
    return build_config(MovieConfig(), options)


class Movie(Entity[MovieID]):
    """Film d'un tenant, identifié par un MovieID."""

    def __init__(self, config: MovieConfig) -> None:
        super().__init__(config)
        self._title = config.title
        self._uri = config.uri

    @property
    def title(self) -> str:
        return self._title

    @property
    def uri(self) -> str:
        return self._uri
