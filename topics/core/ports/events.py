"""
Port de publication des événements de domaine.
"""

from abc import ABC, abstractmethod

from topics.core.events import DomainEvent


class IEventPublisher(ABC):
    """
    Puits d'événements fire-and-forget.

    Les services publient après une opération réussie ; aucun accusé de
    réception n'est attendu.
    """

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """Publie un événement."""
        ...
