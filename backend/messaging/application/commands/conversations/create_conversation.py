"""
Create Conversation Command.

No duplicate detection: every call creates a distinct active conversation.
"""

import logging
from dataclasses import dataclass

from messaging.application.common.interfaces import Command, CommandHandler
from messaging.domain.entities.conversation import Conversation
from messaging.domain.exceptions import DomainValidationError
from messaging.domain.ports.repositories import ConversationRepository
from messaging.domain.value_objects.enums import Channel
from messaging.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateConversationCommand(Command[Conversation]):
    user_id: UserId
    channel: Channel


class CreateConversationHandler(CommandHandler[Conversation]):
    _conversation_repository: ConversationRepository

    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    async def execute(self, command: CreateConversationCommand) -> Conversation:
        try:
            conversation = Conversation.create(
                user_id=command.user_id, channel=command.channel
            )
        except ValueError as e:
            raise DomainValidationError(str(e), field="channel") from e

        await self._conversation_repository.create(conversation)

        logger.info(
            f"Conversation created: id={conversation.id.value} "
            f"user_id={command.user_id.value} channel={conversation.channel.value}"
        )
        return conversation
