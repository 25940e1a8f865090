"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans topics/core/ports/repositories.py, utilisant SQLModel pour
la persistance SQLite.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine et modeles DB (SQLModel)
"""

from topics.infrastructure.persistence.repositories.file_repository import (
    SQLModelFileRepository,
)
from topics.infrastructure.persistence.repositories.message_repository import (
    SQLModelMessageRepository,
)
from topics.infrastructure.persistence.repositories.movie_repository import (
    SQLModelMovieRepository,
)
from topics.infrastructure.persistence.repositories.user_repository import (
    SQLModelUserRepository,
)

__all__ = [
    "SQLModelUserRepository",
    "SQLModelMovieRepository",
    "SQLModelFileRepository",
    "SQLModelMessageRepository",
]
