"""
Interfaces ports pour les repositories.

Contrat générique (IRepository) instancié par type d'entité. Les
implémentations (adaptateurs) fournissent le stockage concret : mémoire
par défaut, SQLite via SQLModel.

Sémantique commune :
- save : insertion ou mise à jour par ID, idempotent, accepte les entités supprimées
- find_by_id : lève NotFoundError si absent (les entités supprimées SONT trouvées)
- list : toutes les entités, filtrées par un prédicat optionnel, ordre déterministe
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, Optional, TypeVar

from topics.core.entities import (
    File,
    FileID,
    Message,
    MessageID,
    Movie,
    MovieID,
    User,
    UserID,
)

EntityT = TypeVar("EntityT")
IdT = TypeVar("IdT", bound=str)

Predicate = Callable[[EntityT], bool]


class IRepository(ABC, Generic[EntityT, IdT]):
    """Contrat de persistance d'un type d'entité."""

    @abstractmethod
    def save(self, entity: EntityT) -> None:
        """Sauvegarde une entité (insertion ou mise à jour)."""
        ...

    @abstractmethod
    def find_by_id(self, entity_id: IdT) -> EntityT:
        """Récupère une entité par son ID. Lève NotFoundError si absente."""
        ...

    @abstractmethod
    def list(self, predicate: Optional[Predicate] = None) -> list[EntityT]:
        """Liste les entités, filtrées par le prédicat s'il est fourni."""
        ...


class IUserRepository(IRepository[User, UserID]):
    """Interface de stockage des utilisateurs."""


class IMovieRepository(IRepository[Movie, MovieID]):
    """Interface de stockage des films."""


class IFileRepository(IRepository[File, FileID]):
    """Interface de stockage des fichiers média."""


class IMessageRepository(IRepository[Message, MessageID]):
    """Interface de stockage des messages."""
