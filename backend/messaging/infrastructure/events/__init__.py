"""Event sink implementations."""

from messaging.infrastructure.events.noop_event_publisher import NoOpEventPublisher
from messaging.infrastructure.events.redis_event_publisher import RedisEventPublisher

__all__ = [
    "RedisEventPublisher",
    "NoOpEventPublisher",
]
