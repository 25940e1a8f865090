"""
Entité User.

L'email est obligatoire ; prénom et nom sont facultatifs.
"""

from dataclasses import dataclass
from typing import ClassVar, NewType

from topics.core.entities.base import Entity
from topics.core.entities.config import (
    EntityConfig,
    Option,
    build_config,
    optional,
    required,
)

UserID = NewType("UserID", str)


@dataclass
class UserConfig(EntityConfig):
    email: str = ""
    first_name: str = ""
    last_name: str = ""

    required_fields: ClassVar[tuple[str, ...]] = ("email",)


def with_email(email: str) -> Option:
    return required("email", email)


def with_first_name(first_name: str) -> Option:
    return optional("first_name", first_name)


def with_last_name(last_name: str) -> Option:
    return optional("last_name", last_name)


def new_user_config(*options: Option) -> UserConfig:
    """Construit une configuration d'utilisateur validée (lève ValidationError)."""
    return build_config(UserConfig(), options)


class User(Entity[UserID]):
    """Utilisateur d'un tenant."""

    def __init__(self, config: UserConfig) -> None:
        super().__init__(config)
        self._email = config.email
        self._first_name = config.first_name
        self._last_name = config.last_name

    @property
    def email(self) -> str:
        return self._email

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name
