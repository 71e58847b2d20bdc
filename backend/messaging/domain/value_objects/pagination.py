"""
Filters and pagination windows for list queries.
"""

from dataclasses import dataclass
from typing import Optional

from messaging.domain.value_objects.enums import Channel, ConversationStatus


@dataclass(frozen=True)
class PaginationParams:
    limit: int = 50
    offset: int = 0

    def __post_init__(self):
        if self.limit < 1:
            raise ValueError("limit must be at least 1")
        if self.offset < 0:
            raise ValueError("offset cannot be negative")


@dataclass(frozen=True)
class ConversationFilters:
    channel: Optional[Channel] = None
    status: Optional[ConversationStatus] = None
    limit: int = 20
    offset: int = 0

    def __post_init__(self):
        if self.limit < 1:
            raise ValueError("limit must be at least 1")
        if self.offset < 0:
            raise ValueError("offset cannot be negative")
