"""
Redis Cache Service - CacheService backed by redis.asyncio.

Redis Data Structure (STRING, JSON payload):
- "conversation:{id}"          → one conversation, TTL Config.CACHE_CONVERSATION_TTL
- "messages:{conversation_id}" → {"limit": n, "messages": [...]}, TTL Config.CACHE_MESSAGES_TTL
- "messages_version:{conversation_id}" → INCR counter, bumped on every page delete

A page write is a compare-and-set against the version counter (Lua script),
so it lands only if no delete_messages ran since the reader took the version.

Error Handling:
- Cache failures should NOT fail the operation
- Reads: RedisError or an undecodable payload → logged warning, treated as a miss
- Writes/deletes: RedisError → logged warning, no-op
"""

import json
import logging
from typing import Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from messaging.config.settings import Config
from messaging.domain.entities.conversation import Conversation
from messaging.domain.ports.cache import CacheService, MessagePage
from messaging.domain.value_objects.conversation_id import ConversationId
from messaging.infrastructure.serialization import (
    conversation_from_dict,
    conversation_to_dict,
    message_from_dict,
    message_to_dict,
)

logger = logging.getLogger(__name__)

# Payload problems: bad JSON, missing keys, values the entities reject
_DECODE_ERRORS = (ValueError, KeyError, TypeError)

# KEYS[1] = version key, KEYS[2] = page key; ARGV = expected version, payload, ttl
_SET_PAGE_IF_VERSION = """
if (redis.call("GET", KEYS[1]) or "0") == ARGV[1] then
    redis.call("SET", KEYS[2], ARGV[2], "EX", ARGV[3])
    return 1
end
return 0
"""


class RedisCacheService(CacheService):
    def __init__(
        self,
        redis: Redis,
        conversation_ttl: int = Config.CACHE_CONVERSATION_TTL,
        messages_ttl: int = Config.CACHE_MESSAGES_TTL,
    ):
        self._redis = redis
        self._conversation_ttl = conversation_ttl
        self._messages_ttl = messages_ttl

    @staticmethod
    def _conversation_key(conversation_id: ConversationId) -> str:
        return f"conversation:{conversation_id.value}"

    @staticmethod
    def _messages_key(conversation_id: ConversationId) -> str:
        return f"messages:{conversation_id.value}"

    @staticmethod
    def _version_key(conversation_id: ConversationId) -> str:
        return f"messages_version:{conversation_id.value}"

    # ==================== CONVERSATIONS ====================

    async def get_conversation(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        key = self._conversation_key(conversation_id)
        raw = await self._get(key)
        if raw is None:
            return None
        try:
            return conversation_from_dict(json.loads(raw))
        except _DECODE_ERRORS as e:
            logger.warning(f"Corrupt cache entry {key}, treating as miss: {e}")
            return None

    async def set_conversation(self, conversation: Conversation) -> None:
        await self._set(
            self._conversation_key(conversation.id),
            json.dumps(conversation_to_dict(conversation)),
            self._conversation_ttl,
        )

    async def delete_conversation(self, conversation_id: ConversationId) -> None:
        await self._delete(self._conversation_key(conversation_id))

    # ==================== MESSAGE PAGES ====================

    async def get_messages(
        self, conversation_id: ConversationId
    ) -> Optional[MessagePage]:
        key = self._messages_key(conversation_id)
        raw = await self._get(key)
        if raw is None:
            return None
        try:
            d = json.loads(raw)
            return MessagePage(
                limit=int(d["limit"]),
                messages=[message_from_dict(m) for m in d["messages"]],
            )
        except _DECODE_ERRORS as e:
            logger.warning(f"Corrupt cache entry {key}, treating as miss: {e}")
            return None

    async def messages_version(
        self, conversation_id: ConversationId
    ) -> Optional[int]:
        key = self._version_key(conversation_id)
        try:
            raw = await self._redis.get(key)
        except RedisError as e:
            logger.warning(f"Redis cache read error for {key}: {e}")
            return None
        try:
            return int(raw or 0)
        except ValueError:
            logger.warning(f"Corrupt cache entry {key}, skipping page write")
            return None

    async def set_messages(
        self, conversation_id: ConversationId, page: MessagePage, version: int
    ) -> bool:
        key = self._messages_key(conversation_id)
        payload = {
            "limit": page.limit,
            "messages": [message_to_dict(m) for m in page.messages],
        }
        try:
            written = await self._redis.eval(
                _SET_PAGE_IF_VERSION,
                2,
                self._version_key(conversation_id),
                key,
                str(version),
                json.dumps(payload),
                self._messages_ttl,
            )
        except RedisError as e:
            logger.warning(f"Redis cache write error for {key}: {e}")
            return False
        if not written:
            logger.debug(f"Skipped stale page write for {key}")
        return bool(written)

    async def delete_messages(self, conversation_id: ConversationId) -> None:
        # Bump first: a reader that took the old version can no longer write.
        version_key = self._version_key(conversation_id)
        try:
            await self._redis.incr(version_key)
            await self._redis.expire(version_key, self._messages_ttl)
        except RedisError as e:
            logger.warning(f"Redis cache version bump error for {version_key}: {e}")
        await self._delete(self._messages_key(conversation_id))

    async def ping(self) -> bool:
        try:
            return bool(await self._redis.ping())
        except RedisError as e:
            logger.warning(f"Redis ping failed: {e}")
            return False

    # ==================== RAW OPERATIONS ====================

    async def _get(self, key: str) -> Optional[str]:
        try:
            raw = await self._redis.get(key)
        except RedisError as e:
            logger.warning(f"Redis cache read error for {key}: {e}")
            return None
        logger.debug(f"Cache {'HIT' if raw is not None else 'MISS'} for {key}")
        return raw

    async def _set(self, key: str, value: str, ttl: int) -> None:
        try:
            await self._redis.set(key, value, ex=ttl)
        except RedisError as e:
            logger.warning(f"Redis cache write error for {key}: {e}")

    async def _delete(self, key: str) -> None:
        try:
            await self._redis.delete(key)
        except RedisError as e:
            logger.warning(f"Redis cache delete error for {key}: {e}")
