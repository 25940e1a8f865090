"""
Capacités de métadonnées partagées par toutes les entités.

- Auditable : date de création immuable et date de suppression logique
- MultiTenant : rattachement immuable à un tenant

Les capacités sont des contrats structurels (Protocol) : une entité les
satisfait en exposant les bons accesseurs, sans hériter d'une hiérarchie.
AuditTrail est l'objet valeur composé dans chaque entité pour les porter.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import NewType, Optional, Protocol, runtime_checkable

Tenancy = NewType("Tenancy", str)


def utcnow() -> datetime:
    """Horodatage courant en UTC (timezone-aware)."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class AuditTrail:
    """
    Métadonnées d'audit d'une entité.

    Attributs :
        created_at : Date de création, fixée une seule fois
        deleted_at : Date de suppression logique, None si l'entité est active
    """

    created_at: datetime = field(default_factory=utcnow)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def mark_deleted(self, at: Optional[datetime] = None) -> "AuditTrail":
        """
        Retourne la piste d'audit marquée comme supprimée.

        La transition est None -> horodatage uniquement : une piste déjà
        supprimée est retournée inchangée.
        """
        if self.deleted_at is not None:
            return self
        deleted_at = at or utcnow()
        # Horloge non monotone : deleted_at ne precede jamais created_at
        return replace(self, deleted_at=max(deleted_at, self.created_at))


@runtime_checkable
class Auditable(Protocol):
    """Entité exposant ses dates de création et de suppression."""

    @property
    def created_at(self) -> datetime: ...

    @property
    def deleted_at(self) -> Optional[datetime]: ...

    def delete(self) -> None: ...


@runtime_checkable
class MultiTenant(Protocol):
    """Entité rattachée à un tenant."""

    @property
    def tenancy(self) -> Tenancy: ...
