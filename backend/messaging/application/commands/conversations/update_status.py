"""
Update Conversation Status Command.

Flow:
1. Resolve ownership through ConversationAccess (same check as GetConversation)
2. Mutate status + updated_at
3. Write through to the record store
4. Invalidate the cached conversation (never refresh it)

Concurrent updates to the same conversation race; the last store write wins.
"""

import logging
from dataclasses import dataclass

from messaging.application.common.access import ConversationAccess
from messaging.application.common.interfaces import Command, CommandHandler
from messaging.domain.entities.conversation import Conversation
from messaging.domain.exceptions import DomainValidationError
from messaging.domain.ports.repositories import ConversationRepository
from messaging.domain.value_objects.conversation_id import ConversationId
from messaging.domain.value_objects.enums import ConversationStatus
from messaging.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateConversationStatusCommand(Command[Conversation]):
    conversation_id: ConversationId
    user_id: UserId
    status: ConversationStatus


class UpdateConversationStatusHandler(CommandHandler[Conversation]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        access: ConversationAccess,
    ):
        self._conversation_repository = conversation_repository
        self._access = access

    async def execute(self, command: UpdateConversationStatusCommand) -> Conversation:
        conversation = await self._access.get_conversation(
            command.conversation_id, command.user_id
        )

        try:
            conversation.change_status(command.status)
        except ValueError as e:
            raise DomainValidationError(str(e), field="status") from e

        await self._conversation_repository.update(conversation)
        await self._access.invalidate_conversation(conversation.id)

        logger.info(
            f"Conversation status updated: id={conversation.id.value} "
            f"status={conversation.status.value} user_id={command.user_id.value}"
        )
        return conversation
