"""
Event Publisher Port - Fire-and-forget notification channel.

publish_message_event may raise; callers treat a failure as a missed
notification and never fail the originating operation.
"""

from abc import ABC, abstractmethod

from messaging.domain.entities.message_event import MessageEvent


class EventPublisher(ABC):
    @abstractmethod
    async def publish_message_event(self, event: MessageEvent) -> None: ...
