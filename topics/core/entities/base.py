"""
Socle commun des entités.

Porte l'identité, le tenant et la piste d'audit (composition d'un
AuditTrail), et implémente la suppression logique. Chaque entité concrète
hérite directement de Entity, sur un seul niveau.
"""

from datetime import datetime
from typing import Any, Generic, Optional, TypeVar

from topics.core.entities.config import EntityConfig
from topics.core.metadata import AuditTrail, Tenancy

IdT = TypeVar("IdT", bound=str)


class Entity(Generic[IdT]):
    """
    Entité auditable et multi-tenant.

    L'identifiant, le tenant et created_at sont en lecture seule ; la seule
    mutation possible est delete().
    La configuration est revalidee a la construction : aucune entite
    partielle ni sans tenant ne peut exister.
    """

    def __init__(self, config: EntityConfig) -> None:
        config.validate()
        self._id: IdT = config.id  # type: ignore[assignment]
        self._tenancy = Tenancy(config.tenancy)
        self._audit = AuditTrail(created_at=config.created_at, deleted_at=config.deleted_at)

    @property
    def id(self) -> IdT:
        return self._id

    @property
    def tenancy(self) -> Tenancy:
        return self._tenancy

    @property
    def created_at(self) -> datetime:
        return self._audit.created_at

    @property
    def deleted_at(self) -> Optional[datetime]:
        return self._audit.deleted_at

    @property
    def is_deleted(self) -> bool:
        return self._audit.is_deleted

    def delete(self) -> None:
        """Suppression logique. Idempotent : un second appel ne change rien."""
        self._audit = self._audit.mark_deleted()

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))

    def __repr__(self) -> str:
        state = "deleted" if self.is_deleted else "active"
        return f"<{type(self).__name__} id={self._id} tenancy={self._tenancy} {state}>"
