"""
Entités métier du domaine.

Chaque entité est construite à partir d'une configuration validée
(voir config.py), expose les capacités Auditable et MultiTenant, et ne
supporte qu'une mutation : delete() (suppression logique).

Exports :
- User, Movie, File, Message : Entités
- UserID, MovieID, FileID, MessageID : Identifiants typés
- EntityConfig, Option, build_config : Mécanique de configuration
"""

from topics.core.entities.config import EntityConfig, Option, build_config, with_tenancy
from topics.core.entities.file import File, FileConfig, FileID, new_file_config
from topics.core.entities.message import (
    Message,
    MessageConfig,
    MessageID,
    new_message_config,
)
from topics.core.entities.movie import Movie, MovieConfig, MovieID, new_movie_config
from topics.core.entities.user import User, UserConfig, UserID, new_user_config

__all__ = [
    "EntityConfig",
    "Option",
    "build_config",
    "with_tenancy",
    "User",
    "UserConfig",
    "UserID",
    "new_user_config",
    "Movie",
    "MovieConfig",
    "MovieID",
    "new_movie_config",
    "File",
    "FileConfig",
    "FileID",
    "new_file_config",
    "Message",
    "MessageConfig",
    "MessageID",
    "new_message_config",
]
