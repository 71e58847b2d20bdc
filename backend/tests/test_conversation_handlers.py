"""Conversation commands and queries over in-memory repositories and a fake cache."""

import pytest

from messaging.application.commands.conversations import (
    CreateConversationCommand,
    UpdateConversationStatusCommand,
)
from messaging.application.queries.conversations import (
    GetConversationQuery,
    ListConversationsQuery,
)
from messaging.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
    NotFoundOrDeniedError,
)
from messaging.domain.value_objects.conversation_id import ConversationId
from messaging.domain.value_objects.enums import Channel, ConversationStatus
from messaging.domain.value_objects.pagination import ConversationFilters
from messaging.domain.value_objects.user_id import UserId

U1 = UserId("user-1")
U2 = UserId("user-2")


async def create(services, user=U1, channel=Channel.WEB):
    return await services.create_conversation.execute(
        CreateConversationCommand(user_id=user, channel=channel)
    )


async def test_create_conversation_starts_active(services):
    conversation = await create(services, channel=Channel.WHATSAPP)

    assert conversation.status == ConversationStatus.ACTIVE
    assert conversation.channel == Channel.WHATSAPP
    assert conversation.user_id == U1
    assert conversation.created_at == conversation.updated_at
    assert await services.conversations.get_by_id(conversation.id) is not None


async def test_create_conversation_rejects_unknown_channel(services):
    with pytest.raises(DomainValidationError) as exc_info:
        await create(services, channel="telegram")
    assert exc_info.value.field == "channel"


async def test_owner_can_get_conversation(services):
    conversation = await create(services)

    fetched = await services.get_conversation.execute(
        GetConversationQuery(conversation_id=conversation.id, user_id=U1)
    )

    assert fetched.id == conversation.id
    assert fetched.user_id == U1


async def test_absent_and_foreign_conversations_are_indistinguishable(services):
    conversation = await create(services)

    with pytest.raises(NotFoundOrDeniedError) as foreign:
        await services.get_conversation.execute(
            GetConversationQuery(conversation_id=conversation.id, user_id=U2)
        )
    with pytest.raises(NotFoundOrDeniedError) as absent:
        await services.get_conversation.execute(
            GetConversationQuery(conversation_id=ConversationId.generate(), user_id=U2)
        )

    assert type(foreign.value) is type(absent.value)
    assert str(foreign.value) == str(absent.value)


def test_not_found_or_denied_is_both_error_kinds():
    error = NotFoundOrDeniedError()
    assert isinstance(error, EntityNotFoundError)
    assert isinstance(error, AccessDeniedError)


async def test_cache_is_populated_only_after_owned_store_read(services):
    conversation = await create(services)

    with pytest.raises(NotFoundOrDeniedError):
        await services.get_conversation.execute(
            GetConversationQuery(conversation_id=conversation.id, user_id=U2)
        )
    assert conversation.id.value not in services.cache.conversations

    await services.get_conversation.execute(
        GetConversationQuery(conversation_id=conversation.id, user_id=U1)
    )
    assert conversation.id.value in services.cache.conversations


async def test_cached_get_is_idempotent(services):
    conversation = await create(services)
    query = GetConversationQuery(conversation_id=conversation.id, user_id=U1)

    first = await services.get_conversation.execute(query)
    # Served from cache even once the store row is gone
    await services.conversations.delete(conversation.id)
    second = await services.get_conversation.execute(query)

    assert first == second


async def test_cached_conversation_still_checks_ownership(services):
    conversation = await create(services)
    await services.get_conversation.execute(
        GetConversationQuery(conversation_id=conversation.id, user_id=U1)
    )
    assert conversation.id.value in services.cache.conversations

    with pytest.raises(NotFoundOrDeniedError):
        await services.get_conversation.execute(
            GetConversationQuery(conversation_id=conversation.id, user_id=U2)
        )


async def test_update_status_invalidates_cache(services):
    conversation = await create(services)
    query = GetConversationQuery(conversation_id=conversation.id, user_id=U1)
    await services.get_conversation.execute(query)

    updated = await services.update_status.execute(
        UpdateConversationStatusCommand(
            conversation_id=conversation.id,
            user_id=U1,
            status=ConversationStatus.CLOSED,
        )
    )

    assert updated.status == ConversationStatus.CLOSED
    assert updated.updated_at >= conversation.updated_at
    assert conversation.id.value not in services.cache.conversations
    assert services.log.index(
        ("cache.delete_conversation", conversation.id.value)
    ) > services.log.index(("cache.set_conversation", conversation.id.value))

    fetched = await services.get_conversation.execute(query)
    assert fetched.status == ConversationStatus.CLOSED


async def test_any_status_transition_is_allowed(services):
    conversation = await create(services)
    for status in (
        ConversationStatus.ARCHIVED,
        ConversationStatus.ACTIVE,
        ConversationStatus.CLOSED,
        ConversationStatus.ACTIVE,
    ):
        updated = await services.update_status.execute(
            UpdateConversationStatusCommand(
                conversation_id=conversation.id, user_id=U1, status=status
            )
        )
        assert updated.status == status


async def test_update_status_by_non_owner_changes_nothing(services):
    conversation = await create(services)

    with pytest.raises(NotFoundOrDeniedError):
        await services.update_status.execute(
            UpdateConversationStatusCommand(
                conversation_id=conversation.id,
                user_id=U2,
                status=ConversationStatus.ARCHIVED,
            )
        )

    stored = await services.conversations.get_by_id(conversation.id)
    assert stored.status == ConversationStatus.ACTIVE


async def test_update_status_rejects_unknown_status(services):
    conversation = await create(services)

    with pytest.raises(DomainValidationError):
        await services.update_status.execute(
            UpdateConversationStatusCommand(
                conversation_id=conversation.id, user_id=U1, status="deleted"
            )
        )


async def test_list_conversations_only_returns_own_newest_first(services):
    first = await create(services)
    second = await create(services, channel=Channel.INSTAGRAM)
    await create(services, user=U2)

    conversations = await services.list_conversations.execute(
        ListConversationsQuery(user_id=U1)
    )

    assert [c.id for c in conversations] == [second.id, first.id]


async def test_list_conversations_filters_and_paginates(services):
    web = await create(services, channel=Channel.WEB)
    await create(services, channel=Channel.WHATSAPP)
    await services.update_status.execute(
        UpdateConversationStatusCommand(
            conversation_id=web.id, user_id=U1, status=ConversationStatus.CLOSED
        )
    )

    by_channel = await services.list_conversations.execute(
        ListConversationsQuery(
            user_id=U1, filters=ConversationFilters(channel=Channel.WEB)
        )
    )
    by_status = await services.list_conversations.execute(
        ListConversationsQuery(
            user_id=U1, filters=ConversationFilters(status=ConversationStatus.ACTIVE)
        )
    )
    window = await services.list_conversations.execute(
        ListConversationsQuery(user_id=U1, filters=ConversationFilters(limit=1, offset=1))
    )

    assert [c.id for c in by_channel] == [web.id]
    assert [c.channel for c in by_status] == [Channel.WHATSAPP]
    assert len(window) == 1
