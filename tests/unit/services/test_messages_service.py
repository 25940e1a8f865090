"""
Tests pour MessagesService.

get_messages() expose les messages supprimes avec leur deleted_at.
"""

import pytest

from topics.core.errors import NotFoundError, ValidationError
from topics.core.events import MessageSent

TENANCY = "tenancy/test"


class TestSendMessage:
    """Tests de send_message."""

    def test_send_persists_and_publishes(self, messages_service, message_repo, event_publisher):
        message_id = messages_service.send_message("user-1", "general", "hello")

        message = message_repo.find_by_id(message_id)
        assert message.content == "hello"
        assert message.tenancy == TENANCY
        assert event_publisher.events == [
            MessageSent(id=message_id, author_id="user-1", channel_id="general", tenancy=TENANCY)
        ]

    def test_explicit_tenancy_wins(self, messages_service, message_repo):
        message_id = messages_service.send_message(
            "user-1", "general", "hello", tenancy="tenancy/other"
        )
        assert message_repo.find_by_id(message_id).tenancy == "tenancy/other"

    def test_explicit_empty_tenancy_rejected(self, messages_service, message_repo):
        with pytest.raises(ValidationError) as exc_info:
            messages_service.send_message("user-1", "general", "hello", tenancy="")
        assert exc_info.value.fields == ["tenancy"]
        assert message_repo.list() == []

    def test_send_invalid_reports_all_fields(self, messages_service):
        with pytest.raises(ValidationError) as exc_info:
            messages_service.send_message("", "", "")
        assert sorted(exc_info.value.fields) == ["author_id", "channel_id", "content"]


class TestGetMessages:
    """Tests de get_messages."""

    def test_deleted_message_is_surfaced(self, messages_service):
        message_id = messages_service.send_message("user-1", "general", "hello")
        messages_service.delete_message(message_id)

        infos = messages_service.get_messages("general")

        assert len(infos) == 1
        assert infos[0].id == message_id
        assert infos[0].content == "hello"
        assert infos[0].deleted_at is not None

    def test_filters_by_channel_in_order(self, messages_service):
        first = messages_service.send_message("user-1", "general", "one")
        messages_service.send_message("user-2", "random", "other")
        second = messages_service.send_message("user-2", "general", "two")

        assert [info.id for info in messages_service.get_messages("general")] == [first, second]

    def test_unknown_channel_is_empty(self, messages_service):
        assert messages_service.get_messages("vide") == []

    def test_delete_unknown_message(self, messages_service):
        with pytest.raises(NotFoundError):
            messages_service.delete_message("inconnu")
