"""
Socle commun des repositories SQLModel.

Chaque repository concret fournit la conversion bidirectionnelle entre
l'entite de domaine et son modele de persistance ; le socle porte la
logique save / find_by_id / list, la conversion des erreurs SQLAlchemy en
RepositoryError et le verrou protegeant la session partagee.
"""

from __future__ import annotations

import threading
from abc import abstractmethod
from datetime import datetime, timezone
from typing import Generic, Optional, TypeVar

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, select

from topics.core.errors import NotFoundError, RepositoryError
from topics.core.ports.repositories import EntityT, IdT, IRepository, Predicate

ModelT = TypeVar("ModelT", bound=SQLModel)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite perd le fuseau : les dates relues sont naives, en UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLModelRepository(IRepository[EntityT, IdT], Generic[EntityT, IdT, ModelT]):
    """
    Repository SQLModel generique.

    Recoit une session SQLModel et un verrou via injection de dependances.
    Les repositories d'une meme base partagent la session et le verrou :
    ni la session ni la connexion SQLite sous-jacente ne sont thread-safe.
    """

    entity_name = "Entity"
    model: type[ModelT]

    def __init__(self, session: Session, lock: Optional[threading.Lock] = None) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
            lock : Verrou partage par tous les repositories de la session
                (un verrou propre au repository si absent)
        """
        self._session = session
        self._lock = lock if lock is not None else threading.Lock()

    @abstractmethod
    def _to_entity(self, model: ModelT) -> EntityT:
        """Convertit un modele DB en entite domaine."""
        ...

    @abstractmethod
    def _to_model(self, entity: EntityT) -> ModelT:
        """Convertit une entite domaine en modele DB."""
        ...

    def save(self, entity: EntityT) -> None:
        """Sauvegarde une entite (insertion ou mise a jour par ID)."""
        with self._lock:
            try:
                self._session.merge(self._to_model(entity))
                self._session.commit()
            except SQLAlchemyError as exc:
                self._session.rollback()
                logger.error("Echec de sauvegarde", entity=self.entity_name, id=entity.id)
                raise RepositoryError(
                    f"Echec de sauvegarde {self.entity_name} {entity.id}"
                ) from exc

    def find_by_id(self, entity_id: IdT) -> EntityT:
        """Recupere une entite par son ID. Leve NotFoundError si absente."""
        with self._lock:
            try:
                model = self._session.get(self.model, entity_id)
                if model is None:
                    raise NotFoundError(self.entity_name, entity_id)
                return self._to_entity(model)
            except SQLAlchemyError as exc:
                raise RepositoryError(
                    f"Echec de lecture {self.entity_name} {entity_id}"
                ) from exc

    def list(self, predicate: Optional[Predicate] = None) -> list[EntityT]:
        """Liste les entites par date de creation, filtrees par le predicat."""
        statement = select(self.model).order_by(self.model.created_at, self.model.id)
        with self._lock:
            try:
                models = self._session.exec(statement).all()
                entities = [self._to_entity(model) for model in models]
            except SQLAlchemyError as exc:
                raise RepositoryError(f"Echec de listing {self.entity_name}") from exc
        if predicate is None:
            return entities
        return [entity for entity in entities if predicate(entity)]
