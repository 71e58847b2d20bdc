"""
MessageEvent - Notification emitted after a message has been stored.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone

from messaging.domain.entities.message import Message

MESSAGE_RECEIVED = "message.received"


@dataclass(frozen=True)
class MessageEvent:
    type: str
    conversation_id: str
    message: Message
    timestamp: datetime

    @classmethod
    def message_received(cls, message: Message) -> MessageEvent:
        return cls(
            type=MESSAGE_RECEIVED,
            conversation_id=message.conversation_id.value,
            message=message,
            timestamp=datetime.now(timezone.utc),
        )
