"""
Redis Event Publisher - PUBLISH message events on a Redis channel.

Payload (JSON):
    {"type": "message.received", "conversation_id": "...",
     "message": {...}, "timestamp": "..."}

Publishing is fire-and-forget: there are no subscribers to wait for and no
retry. Errors are raised to the caller, which logs and swallows them.
"""

import json
import logging

from redis.asyncio import Redis

from messaging.config.settings import Config
from messaging.domain.entities.message_event import MessageEvent
from messaging.domain.ports.event_publisher import EventPublisher
from messaging.infrastructure.serialization import event_to_dict

logger = logging.getLogger(__name__)


class RedisEventPublisher(EventPublisher):
    def __init__(self, redis: Redis, topic: str = Config.EVENTS_TOPIC):
        self._redis = redis
        self._topic = topic

    async def publish_message_event(self, event: MessageEvent) -> None:
        payload = json.dumps(event_to_dict(event))
        receivers = await self._redis.publish(self._topic, payload)
        logger.debug(
            f"Published {event.type} for conversation {event.conversation_id} "
            f"to {self._topic} ({receivers} receivers)"
        )
