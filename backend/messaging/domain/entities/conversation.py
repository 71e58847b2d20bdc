"""
Conversation Entity - A channel-scoped thread belonging to one user.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone

from messaging.domain.value_objects.conversation_id import ConversationId
from messaging.domain.value_objects.enums import Channel, ConversationStatus
from messaging.domain.value_objects.user_id import UserId


@dataclass
class Conversation:
    id: ConversationId
    user_id: UserId
    channel: Channel
    status: ConversationStatus
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        self.channel = Channel(self.channel)
        self.status = ConversationStatus(self.status)

    @classmethod
    def create(cls, user_id: UserId, channel: Channel) -> Conversation:
        """Factory method for a new active conversation."""
        now = datetime.now(timezone.utc)
        return cls(
            id=ConversationId.generate(),
            user_id=user_id,
            channel=Channel(channel),
            status=ConversationStatus.ACTIVE,
            created_at=now,
            updated_at=now,
        )

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.user_id.value == user_id.value

    def change_status(self, new_status: ConversationStatus) -> None:
        # No state machine: any status may follow any other.
        self.status = ConversationStatus(new_status)
        self.updated_at = datetime.now(timezone.utc)
