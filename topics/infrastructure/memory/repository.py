"""
Repository en mémoire générique.

Stocke des instantanés (copies profondes) des entités dans un dict indexé
par ID. L'ordre d'insertion du dict garantit un listing déterministe.
Un verrou sérialise toutes les opérations : plusieurs threads peuvent
appeler save / find_by_id / list simultanément sans corrompre l'état.
"""

from __future__ import annotations

import copy
import threading
from typing import Generic, Optional

from loguru import logger

from topics.core.errors import NotFoundError
from topics.core.ports.repositories import EntityT, IdT, IRepository, Predicate


class InMemoryRepository(IRepository[EntityT, IdT], Generic[EntityT, IdT]):
    """
    Implémentation de IRepository adossée à un dict.

    Les entités retournées sont des copies : une mutation non sauvegardée
    (ex: delete() sans save) n'atteint jamais le stockage.
    """

    entity_name = "Entity"

    def __init__(self) -> None:
        self._items: dict[str, EntityT] = {}
        self._lock = threading.Lock()

    def save(self, entity: EntityT) -> None:
        """Sauvegarde un instantané de l'entité (insertion ou mise à jour)."""
        snapshot = copy.deepcopy(entity)
        with self._lock:
            self._items[snapshot.id] = snapshot
        logger.debug("Entité sauvegardée", entity=self.entity_name, id=snapshot.id)

    def find_by_id(self, entity_id: IdT) -> EntityT:
        """Récupère une copie de l'entité. Lève NotFoundError si absente."""
        with self._lock:
            entity = self._items.get(entity_id)
            if entity is None:
                raise NotFoundError(self.entity_name, entity_id)
            return copy.deepcopy(entity)

    def list(self, predicate: Optional[Predicate] = None) -> list[EntityT]:
        """Liste des copies des entités, dans l'ordre d'insertion."""
        with self._lock:
            items = list(self._items.values())
            return [
                copy.deepcopy(item)
                for item in items
                if predicate is None or predicate(item)
            ]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
