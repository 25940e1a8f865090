"""
Implementation SQLModel du repository Message.
"""

from topics.core.entities import Message, MessageConfig, MessageID
from topics.core.ports.repositories import IMessageRepository
from topics.infrastructure.persistence.models import MessageModel
from topics.infrastructure.persistence.repositories.base import SQLModelRepository, as_utc


class SQLModelMessageRepository(
    SQLModelRepository[Message, MessageID, MessageModel], IMessageRepository
):
    """Repository SQLModel pour les messages."""

    entity_name = "Message"
    model = MessageModel

    def _to_entity(self, model: MessageModel) -> Message:
        return Message(
            MessageConfig(
                id=model.id,
                tenancy=model.tenancy,
                created_at=as_utc(model.created_at),
                deleted_at=as_utc(model.deleted_at),
                author_id=model.author_id,
                channel_id=model.channel_id,
                content=model.content,
            )
        )

    def _to_model(self, entity: Message) -> MessageModel:
        return MessageModel(
            id=entity.id,
            tenancy=entity.tenancy,
            created_at=entity.created_at,
            deleted_at=entity.deleted_at,
            author_id=entity.author_id,
            channel_id=entity.channel_id,
            content=entity.content,
        )
