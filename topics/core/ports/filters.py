"""
Prédicats réutilisables pour IRepository.list().

Ils s'appliquent à toute entité exposant les capacités Auditable et
MultiTenant.
"""

from typing import Any, Callable, Optional

from topics.core.metadata import Auditable, MultiTenant


def is_active(entity: Auditable) -> bool:
    """Vrai si l'entité n'est pas supprimée logiquement."""
    return entity.deleted_at is None


def belongs_to(tenancy: str) -> Callable[[MultiTenant], bool]:
    """Prédicat : l'entité appartient au tenant donné."""

    def predicate(entity: MultiTenant) -> bool:
        return entity.tenancy == tenancy

    return predicate


def all_of(*predicates: Optional[Callable[[Any], bool]]) -> Optional[Callable[[Any], bool]]:
    """
    Combine des prédicats par ET logique.

    Les prédicats None sont ignorés ; retourne None si aucun ne reste,
    ce qui signifie "pas de filtre" pour list().
    """
    active = [p for p in predicates if p is not None]
    if not active:
        return None
    if len(active) == 1:
        return active[0]

    def predicate(entity: Any) -> bool:
        return all(p(entity) for p in active)

    return predicate
