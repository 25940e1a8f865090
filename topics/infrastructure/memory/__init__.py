"""
Stockage en mémoire (backend par défaut).

Aucune garantie de durabilité : les données vivent le temps du processus.
"""

from topics.infrastructure.memory.repositories import (
    InMemoryFileRepository,
    InMemoryMessageRepository,
    InMemoryMovieRepository,
    InMemoryUserRepository,
)
from topics.infrastructure.memory.repository import InMemoryRepository

__all__ = [
    "InMemoryRepository",
    "InMemoryUserRepository",
    "InMemoryMovieRepository",
    "InMemoryFileRepository",
    "InMemoryMessageRepository",
]
