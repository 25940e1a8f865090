"""
Couche application (cas d'utilisation).

Les services orchestrent la logique du domaine : construction validée des
entités, appels aux repositories, coordination entre entités (Movie <-> File)
et publication d'événements. Ils ne suppriment ni ne réessaient jamais les
erreurs : elles remontent immédiatement à l'appelant.
"""

from topics.services.dataclasses import FileInfo, MessageInfo, MovieInfo, UserInfo
from topics.services.file import FileService
from topics.services.messages import MessagesService
from topics.services.movie import MovieService
from topics.services.user import UserService

__all__ = [
    "UserService",
    "MovieService",
    "FileService",
    "MessagesService",
    "UserInfo",
    "MovieInfo",
    "FileInfo",
    "MessageInfo",
]
