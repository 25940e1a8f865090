"""
Entité Message.

Message publié dans un canal. L'auteur est une référence faible (UserID)
qui n'est pas vérifiée à la construction.
"""

from dataclasses import dataclass
from typing import ClassVar, NewType

from topics.core.entities.base import Entity
from topics.core.entities.config import EntityConfig, Option, build_config, required
from topics.core.entities.user import UserID

MessageID = NewType("MessageID", str)


@dataclass
class MessageConfig(EntityConfig):
    author_id: str = ""
    channel_id: str = ""
    content: str = ""

    required_fields: ClassVar[tuple[str, ...]] = ("author_id", "channel_id", "content")


def with_author_id(author_id: str) -> Option:
    return required("author_id", author_id)


def with_channel_id(channel_id: str) -> Option:
    return required("channel_id", channel_id)


def with_content(content: str) -> Option:
    return required("content", content)


def new_message_config(*options: Option) -> MessageConfig:
    """Construit une configuration de message validée (lève ValidationError)."""
    return build_config(MessageConfig(), options)


class Message(Entity[MessageID]):
    """Message d'un canal."""

    def __init__(self, config: MessageConfig) -> None:
        super().__init__(config)
        self._author_id = UserID(config.author_id)
        self._channel_id = config.channel_id
        self._content = config.content

    @property
    def author_id(self) -> UserID:
        return self._author_id

    @property
    def channel_id(self) -> str:
        return self._channel_id

    @property
    def content(self) -> str:
        return self._content
