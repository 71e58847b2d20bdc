"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class CreateConversationCommand(Command[Conversation]):
        user_id: UserId
        channel: Channel

    class CreateConversationHandler(CommandHandler[Conversation]):
        def __init__(self, conversation_repository: ConversationRepository):
            self._conversation_repository = conversation_repository

        async def execute(self, command: CreateConversationCommand) -> Conversation:
            conversation = Conversation.create(command.user_id, command.channel)
            await self._conversation_repository.create(conversation)
            return conversation
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")


class Command(ABC, Generic[T]):
    """Base class for write operations"""

    pass


class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...


class Query(ABC, Generic[T]):
    """Base class for read operations"""

    pass


class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
