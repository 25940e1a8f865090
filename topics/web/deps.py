"""
Dépendances partagées des routes.

Les services sont résolus depuis le Container DI attaché à l'application.
"""

from fastapi import Request

from ..services import FileService, MessagesService, MovieService, UserService


def get_movie_service(request: Request) -> MovieService:
    return request.app.state.container.movie_service()


def get_file_service(request: Request) -> FileService:
    return request.app.state.container.file_service()


def get_user_service(request: Request) -> UserService:
    return request.app.state.container.user_service()


def get_messages_service(request: Request) -> MessagesService:
    return request.app.state.container.messages_service()
