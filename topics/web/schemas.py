"""
Contrats requête / réponse de l'API HTTP.

Les requêtes ne portent que des champs primitifs ; leur validation métier
est laissée aux entités, qui rapportent toutes les violations d'un coup.
Les dates sont encodées en ISO-8601 et deleted_at est omis des réponses
quand il est absent (routes déclarées avec response_model_exclude_none).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class InfoModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    tenancy: str
    created_at: datetime
    deleted_at: Optional[datetime] = None


# Films et fichiers


class RegisterMovieRequest(BaseModel):
    title: str = ""
    uri: str = ""
    tenancy: str = ""


class RegisterMovieResponse(BaseModel):
    id: str


class MovieInfoResponse(InfoModel):
    title: str
    uri: str


class FileInfoResponse(InfoModel):
    movie_id: str
    uri: str


# Utilisateurs


class RegisterUserRequest(BaseModel):
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    tenancy: str = ""


class RegisterUserResponse(BaseModel):
    id: str


class UserInfoResponse(InfoModel):
    email: str
    first_name: str
    last_name: str


# Messages


class SendMessageRequest(BaseModel):
    author_id: str = ""
    content: str = ""
    tenancy: Optional[str] = None


class SendMessageResponse(BaseModel):
    id: str


class MessageInfoResponse(InfoModel):
    author_id: str
    channel_id: str
    content: str


class GetMessagesResponse(BaseModel):
    messages: list[MessageInfoResponse]


# Erreurs


class FieldErrorResponse(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    detail: str
    errors: list[FieldErrorResponse] = []
