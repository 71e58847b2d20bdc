"""
JSON-friendly dict mapping for domain entities.

Used by the Redis cache (entity payloads) and the Redis event publisher
(message.received body). Datetimes are ISO-8601 strings, ids and enums
their raw string values.
"""

from datetime import datetime
from typing import Any

from messaging.domain.entities.attachment import Attachment
from messaging.domain.entities.conversation import Conversation
from messaging.domain.entities.message import Message
from messaging.domain.entities.message_event import MessageEvent
from messaging.domain.value_objects.attachment_id import AttachmentId
from messaging.domain.value_objects.conversation_id import ConversationId
from messaging.domain.value_objects.message_id import MessageId
from messaging.domain.value_objects.user_id import UserId


def conversation_to_dict(conversation: Conversation) -> dict[str, Any]:
    return {
        "id": conversation.id.value,
        "user_id": conversation.user_id.value,
        "channel": conversation.channel.value,
        "status": conversation.status.value,
        "created_at": conversation.created_at.isoformat(),
        "updated_at": conversation.updated_at.isoformat(),
    }


def conversation_from_dict(d: dict[str, Any]) -> Conversation:
    return Conversation(
        id=ConversationId(d["id"]),
        user_id=UserId(d["user_id"]),
        channel=d["channel"],
        status=d["status"],
        created_at=datetime.fromisoformat(d["created_at"]),
        updated_at=datetime.fromisoformat(d["updated_at"]),
    )


def attachment_to_dict(attachment: Attachment) -> dict[str, Any]:
    return {
        "id": attachment.id.value,
        "message_id": attachment.message_id.value,
        "url": attachment.url,
        "type": attachment.type.value,
        "size": attachment.size,
        "filename": attachment.filename,
        "created_at": attachment.created_at.isoformat(),
    }


def attachment_from_dict(d: dict[str, Any]) -> Attachment:
    return Attachment(
        id=AttachmentId(d["id"]),
        message_id=MessageId(d["message_id"]),
        url=d["url"],
        type=d["type"],
        size=d["size"],
        filename=d["filename"],
        created_at=datetime.fromisoformat(d["created_at"]),
    )


def message_to_dict(message: Message) -> dict[str, Any]:
    return {
        "id": message.id.value,
        "conversation_id": message.conversation_id.value,
        "sender_type": message.sender_type.value,
        "sender_id": message.sender_id,
        "content": message.content,
        "content_type": message.content_type.value,
        "metadata": message.metadata,
        "timestamp": message.timestamp.isoformat(),
        "attachments": [attachment_to_dict(a) for a in message.attachments],
    }


def message_from_dict(d: dict[str, Any]) -> Message:
    return Message(
        id=MessageId(d["id"]),
        conversation_id=ConversationId(d["conversation_id"]),
        sender_type=d["sender_type"],
        sender_id=d["sender_id"],
        content=d["content"],
        content_type=d["content_type"],
        metadata=d.get("metadata") or {},
        timestamp=datetime.fromisoformat(d["timestamp"]),
        attachments=[attachment_from_dict(a) for a in d.get("attachments", [])],
    )


def event_to_dict(event: MessageEvent) -> dict[str, Any]:
    return {
        "type": event.type,
        "conversation_id": event.conversation_id,
        "message": message_to_dict(event.message),
        "timestamp": event.timestamp.isoformat(),
    }
