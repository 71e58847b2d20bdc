"""A broken cache never fails an operation; it degrades to a miss or a no-op."""

from unittest.mock import AsyncMock

import pytest

from messaging.application.commands.conversations import (
    CreateConversationCommand,
    UpdateConversationStatusCommand,
)
from messaging.application.commands.messages import SendMessageCommand
from messaging.application.queries.conversations import GetConversationQuery
from messaging.application.queries.messages import ListMessagesQuery
from messaging.domain.exceptions import NotFoundOrDeniedError
from messaging.domain.ports.cache import CacheService, MessagePage
from messaging.domain.value_objects.enums import Channel, ConversationStatus, SenderType
from messaging.domain.value_objects.user_id import UserId

U1 = UserId("user-1")


@pytest.fixture()
def broken_cache_services(services):
    cache = AsyncMock(spec=CacheService)
    for name in (
        "get_conversation",
        "set_conversation",
        "delete_conversation",
        "get_messages",
        "messages_version",
        "set_messages",
        "delete_messages",
    ):
        getattr(cache, name).side_effect = ConnectionError("cache unreachable")
    services.cache = cache
    services.rewire()
    return services


async def test_operations_succeed_with_unreachable_cache(broken_cache_services):
    services = broken_cache_services
    conversation = await services.create_conversation.execute(
        CreateConversationCommand(user_id=U1, channel=Channel.WEB)
    )

    fetched = await services.get_conversation.execute(
        GetConversationQuery(conversation_id=conversation.id, user_id=U1)
    )
    updated = await services.update_status.execute(
        UpdateConversationStatusCommand(
            conversation_id=conversation.id,
            user_id=U1,
            status=ConversationStatus.ARCHIVED,
        )
    )
    message = await services.send_message.execute(
        SendMessageCommand(
            conversation_id=conversation.id,
            sender_type=SenderType.USER,
            sender_id=U1.value,
            content="still works",
        )
    )
    messages = await services.list_messages.execute(
        ListMessagesQuery(conversation_id=conversation.id, user_id=U1)
    )

    assert fetched.id == conversation.id
    assert updated.status == ConversationStatus.ARCHIVED
    assert [m.id for m in messages] == [message.id]
    assert len(services.publisher.events) == 1


async def test_unreachable_cache_still_enforces_ownership(broken_cache_services):
    services = broken_cache_services
    conversation = await services.create_conversation.execute(
        CreateConversationCommand(user_id=U1, channel=Channel.WEB)
    )

    with pytest.raises(NotFoundOrDeniedError):
        await services.get_conversation.execute(
            GetConversationQuery(conversation_id=conversation.id, user_id=UserId("user-2"))
        )


async def test_cache_failures_are_logged_as_warnings(broken_cache_services, caplog):
    services = broken_cache_services
    conversation = await services.create_conversation.execute(
        CreateConversationCommand(user_id=U1, channel=Channel.WEB)
    )

    with caplog.at_level("WARNING", logger="messaging"):
        await services.get_conversation.execute(
            GetConversationQuery(conversation_id=conversation.id, user_id=U1)
        )

    warnings = [r for r in caplog.records if r.levelname == "WARNING"]
    assert any("Cache read failed" in r.getMessage() for r in warnings)
    assert any("Cache write failed" in r.getMessage() for r in warnings)


def test_message_page_coverage():
    full = MessagePage(limit=2, messages=["a", "b"])
    short = MessagePage(limit=5, messages=["a"])

    assert full.covers(1)
    assert full.covers(2)
    assert not full.covers(3)
    assert short.covers(50)
