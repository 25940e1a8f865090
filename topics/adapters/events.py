"""
Implémentations du port IEventPublisher.

- LoggingEventPublisher : écrit chaque événement dans le journal loguru,
  en attendant un vrai bus d'événements
- RecordingEventPublisher : conserve les événements en mémoire (tests, démo)
"""

import threading

from loguru import logger

from topics.core.events import DomainEvent
from topics.core.ports.events import IEventPublisher


class LoggingEventPublisher(IEventPublisher):
    """Publie les événements sous forme de logs structurés."""

    def __init__(self, level: str = "INFO") -> None:
        self._level = level

    def publish(self, event: DomainEvent) -> None:
        logger.bind(event=event.name, **event.to_dict()).log(
            self._level, "Evenement publie : {}", event.name
        )


class RecordingEventPublisher(IEventPublisher):
    """Accumule les événements publiés, dans l'ordre de publication."""

    def __init__(self) -> None:
        self._events: list[DomainEvent] = []
        self._lock = threading.Lock()

    def publish(self, event: DomainEvent) -> None:
        with self._lock:
            self._events.append(event)

    @property
    def events(self) -> list[DomainEvent]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()
