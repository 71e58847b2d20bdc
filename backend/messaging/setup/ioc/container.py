"""
Dishka DI Container Setup.

- Registers all dependencies (repositories, collaborators, handlers)
- Maps abstract ports to concrete implementations
- Chooses every collaborator variant ONCE, from Config, at startup;
  handlers never branch on whether a collaborator is present

Variant selection:
- Record store: DATABASE_URL set → Prisma, else in-memory repositories
- Cache:        REDIS_ENABLED and Redis reachable → RedisCacheService, else NoOpCacheService
- Events:       EVENTS_PROVIDER=redis and Redis reachable → RedisEventPublisher, else NoOp
- Files:        FILE_STORAGE_PROVIDER=local → LocalFileStorage, else NoOpFileStorage

Dishka concepts:
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)
"""

import logging
from dataclasses import dataclass
from typing import AsyncIterable, Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from redis.asyncio import Redis
from redis.exceptions import RedisError

from messaging.application.commands.attachments import CreateAttachmentHandler
from messaging.application.commands.conversations import (
    CreateConversationHandler,
    UpdateConversationStatusHandler,
)
from messaging.application.commands.messages import SendMessageHandler
from messaging.application.common.access import ConversationAccess
from messaging.application.queries.attachments import GetAttachmentHandler
from messaging.application.queries.conversations import (
    GetConversationHandler,
    ListConversationsHandler,
)
from messaging.application.queries.messages import (
    GetMessageHandler,
    ListMessagesHandler,
)
from messaging.config.settings import Config
from messaging.domain.ports.cache import CacheService
from messaging.domain.ports.event_publisher import EventPublisher
from messaging.domain.ports.file_storage import FileStorage
from messaging.domain.ports.repositories import (
    AttachmentRepository,
    ConversationRepository,
    MessageRepository,
)
from messaging.infrastructure.cache import (
    NoOpCacheService,
    RedisCacheService,
    close_redis_client,
    create_redis_client,
)
from messaging.infrastructure.events import NoOpEventPublisher, RedisEventPublisher
from messaging.infrastructure.persistence import (
    InMemoryAttachmentRepository,
    InMemoryConversationRepository,
    InMemoryMessageRepository,
)
from messaging.infrastructure.storage.local_file_storage import LocalFileStorage
from messaging.infrastructure.storage.noop_file_storage import NoOpFileStorage

logger = logging.getLogger(__name__)


@dataclass
class RedisConnection:
    """The shared Redis client, or None when Redis is disabled or unreachable."""

    client: Optional[Redis] = None


class CollaboratorProvider(Provider):
    """Cache, event sink and file store, one variant each per application."""

    def __init__(self, config: type[Config] = Config):
        super().__init__()
        self._config = config

    @provide(scope=Scope.APP)
    async def get_redis(self) -> AsyncIterable[RedisConnection]:
        wanted = self._config.REDIS_ENABLED or self._config.EVENTS_PROVIDER == "redis"
        if not wanted:
            yield RedisConnection()
            return

        try:
            client = await create_redis_client(self._config.REDIS_URL)
        except (RedisError, OSError) as e:
            logger.warning(
                f"[Redis] Unreachable at startup, cache and events disabled: {e}"
            )
            yield RedisConnection()
            return

        yield RedisConnection(client)
        await close_redis_client(client)

    @provide(scope=Scope.APP)
    def get_cache_service(self, redis: RedisConnection) -> CacheService:
        if self._config.REDIS_ENABLED and redis.client is not None:
            return RedisCacheService(
                redis.client,
                conversation_ttl=self._config.CACHE_CONVERSATION_TTL,
                messages_ttl=self._config.CACHE_MESSAGES_TTL,
            )
        logger.info("Cache disabled, using NoOpCacheService")
        return NoOpCacheService()

    @provide(scope=Scope.APP)
    def get_event_publisher(self, redis: RedisConnection) -> EventPublisher:
        if self._config.EVENTS_PROVIDER == "redis" and redis.client is not None:
            return RedisEventPublisher(redis.client, topic=self._config.EVENTS_TOPIC)
        logger.info("Event publishing disabled, using NoOpEventPublisher")
        return NoOpEventPublisher()

    @provide(scope=Scope.APP)
    def get_file_storage(self) -> FileStorage:
        if self._config.FILE_STORAGE_PROVIDER == "local":
            return LocalFileStorage(
                base_path=self._config.FILE_STORAGE_LOCAL_PATH,
                max_size=self._config.FILE_STORAGE_MAX_SIZE,
            )
        logger.info("File storage disabled, using NoOpFileStorage")
        return NoOpFileStorage()


class InMemoryRepositoryProvider(Provider):
    """
    Record store used when no DATABASE_URL is configured.

    APP scope: the repositories own the data, so one instance per application.
    """

    @provide(scope=Scope.APP)
    def get_conversation_repository(self) -> ConversationRepository:
        return InMemoryConversationRepository()

    @provide(scope=Scope.APP)
    def get_message_repository(self) -> MessageRepository:
        return InMemoryMessageRepository()

    @provide(scope=Scope.APP)
    def get_attachment_repository(self) -> AttachmentRepository:
        return InMemoryAttachmentRepository()


class HandlerProvider(Provider):
    """Command/query handlers. Scope.REQUEST = new instance per HTTP request."""

    @provide(scope=Scope.REQUEST)
    def get_conversation_access(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
        attachment_repository: AttachmentRepository,
        cache_service: CacheService,
    ) -> ConversationAccess:
        return ConversationAccess(
            conversation_repository,
            message_repository,
            attachment_repository,
            cache_service,
        )

    # ==================== CONVERSATIONS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_conversation_handler(
        self, conversation_repository: ConversationRepository
    ) -> CreateConversationHandler:
        return CreateConversationHandler(conversation_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_conversation_handler(
        self, access: ConversationAccess
    ) -> GetConversationHandler:
        return GetConversationHandler(access)

    @provide(scope=Scope.REQUEST)
    def get_list_conversations_handler(
        self, conversation_repository: ConversationRepository
    ) -> ListConversationsHandler:
        return ListConversationsHandler(conversation_repository)

    @provide(scope=Scope.REQUEST)
    def get_update_status_handler(
        self,
        conversation_repository: ConversationRepository,
        access: ConversationAccess,
    ) -> UpdateConversationStatusHandler:
        return UpdateConversationStatusHandler(conversation_repository, access)

    # ==================== MESSAGES ====================

    @provide(scope=Scope.REQUEST)
    def get_send_message_handler(
        self,
        access: ConversationAccess,
        message_repository: MessageRepository,
        event_publisher: EventPublisher,
    ) -> SendMessageHandler:
        return SendMessageHandler(
            access=access,
            message_repository=message_repository,
            event_publisher=event_publisher,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_messages_handler(
        self, access: ConversationAccess, message_repository: MessageRepository
    ) -> ListMessagesHandler:
        return ListMessagesHandler(access, message_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_message_handler(self, access: ConversationAccess) -> GetMessageHandler:
        return GetMessageHandler(access)

    # ==================== ATTACHMENTS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_attachment_handler(
        self, attachment_repository: AttachmentRepository
    ) -> CreateAttachmentHandler:
        return CreateAttachmentHandler(attachment_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_attachment_handler(
        self, access: ConversationAccess, attachment_repository: AttachmentRepository
    ) -> GetAttachmentHandler:
        return GetAttachmentHandler(access, attachment_repository)


def repository_provider(config: type[Config] = Config) -> Provider:
    if config.DATABASE_URL:
        from messaging.setup.ioc.prisma_provider import PrismaRepositoryProvider

        logger.info("Record store: Prisma")
        return PrismaRepositoryProvider()
    logger.warning("DATABASE_URL not set, using in-memory repositories")
    return InMemoryRepositoryProvider()


def create_container(
    config: type[Config] = Config, *overrides: Provider
) -> AsyncContainer:
    """
    Create and configure the DI container.

    - Call this ONCE at app startup
    - Providers in overrides are registered last and win (tests use this)
    """
    return make_async_container(
        CollaboratorProvider(config),
        repository_provider(config),
        HandlerProvider(),
        *overrides,
    )
