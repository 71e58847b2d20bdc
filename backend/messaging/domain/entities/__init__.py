"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from messaging.domain.entities.attachment import Attachment
from messaging.domain.entities.conversation import Conversation
from messaging.domain.entities.message import Message
from messaging.domain.entities.message_event import MessageEvent

__all__ = [
    "Attachment",
    "Conversation",
    "Message",
    "MessageEvent",
]
