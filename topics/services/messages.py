"""
Service des messages.

Envoi et lecture des messages d'un canal. get_messages() est le seul
listing qui expose explicitement les messages supprimés, avec leur date
de suppression : l'historique d'un canal reste auditable.
"""

from typing import Optional

from loguru import logger

from topics.core.entities.config import with_tenancy
from topics.core.entities.message import (
    Message,
    MessageID,
    new_message_config,
    with_author_id,
    with_channel_id,
    with_content,
)
from topics.core.events import MessageSent
from topics.core.ports.events import IEventPublisher
from topics.core.ports.repositories import IMessageRepository
from topics.services.dataclasses import MessageInfo


class MessagesService:
    """
    Service applicatif des messages.

    Attributs injectes:
        message_repo: Repository des messages
        event_publisher: Puits d'evenements (optionnel)
        default_tenancy: Tenant appliqué quand l'appelant n'en fournit pas
            (tenancy=None) ; un tenant vide explicite est rejeté
    """

    def __init__(
        self,
        message_repo: IMessageRepository,
        event_publisher: Optional[IEventPublisher] = None,
        default_tenancy: str = "",
    ) -> None:
        self._message_repo = message_repo
        self._event_publisher = event_publisher
        self._default_tenancy = default_tenancy

    def send_message(
        self,
        author_id: str,
        channel_id: str,
        content: str,
        tenancy: Optional[str] = None,
    ) -> MessageID:
        """
        Publie un message dans un canal.

        Raises:
            ValidationError: Si auteur, canal, contenu ou tenant sont vides
            RepositoryError: Si la persistance échoue
        """
        logger.debug("Envoi d'un message", author_id=author_id, channel_id=channel_id)
        message = Message(
            new_message_config(
                with_author_id(author_id),
                with_channel_id(channel_id),
                with_content(content),
                with_tenancy(self._default_tenancy if tenancy is None else tenancy),
            )
        )
        self._message_repo.save(message)

        if self._event_publisher is not None:
            self._event_publisher.publish(
                MessageSent(
                    id=message.id,
                    author_id=message.author_id,
                    channel_id=message.channel_id,
                    tenancy=message.tenancy,
                )
            )
        return message.id

    def get_messages(self, channel_id: str) -> list[MessageInfo]:
        """Liste les messages d'un canal, messages supprimés inclus."""
        return [
            MessageInfo.from_entity(message)
            for message in self._message_repo.list(
                lambda message: message.channel_id == channel_id
            )
        ]

    def delete_message(self, message_id: str) -> None:
        """Supprime logiquement un message (idempotent)."""
        logger.info("Suppression du message", id=message_id)
        message = self._message_repo.find_by_id(MessageID(message_id))
        message.delete()
        self._message_repo.save(message)
