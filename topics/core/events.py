"""
Événements de domaine publiés par les services.

Ce sont de simples enregistrements immuables ; leur livraison est
fire-and-forget via IEventPublisher (aucun accusé de réception attendu).
"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class DomainEvent:
    """Base des événements : nom et charge utile sérialisable."""

    @property
    def name(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        """Convertit en dictionnaire pour serialisation JSON."""
        return asdict(self)


@dataclass(frozen=True)
class UserRegistered(DomainEvent):
    id: str
    email: str
    first_name: str
    last_name: str
    tenancy: str


@dataclass(frozen=True)
class MovieRegistered(DomainEvent):
    id: str
    title: str
    uri: str
    tenancy: str


@dataclass(frozen=True)
class MessageSent(DomainEvent):
    id: str
    author_id: str
    channel_id: str
    tenancy: str
