"""No-op EventPublisher, wired when EVENTS_PROVIDER=none or Redis is unavailable."""

import logging

from messaging.domain.entities.message_event import MessageEvent
from messaging.domain.ports.event_publisher import EventPublisher

logger = logging.getLogger(__name__)


class NoOpEventPublisher(EventPublisher):
    async def publish_message_event(self, event: MessageEvent) -> None:
        logger.debug(f"Event publishing disabled, dropping {event.type}")
