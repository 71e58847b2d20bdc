"""
SendMessage Command - Store a message in a conversation and announce it.

Command data:
- conversation_id: ConversationId
- sender_type: user | bot | system
- sender_id: str (doubles as the acting user id for the ownership check)
- content: str (required, non-blank)
- content_type: text | image | video | audio | file
- metadata: free-form JSON object

Handler (order matters):
1. Verify the sender owns the conversation (ConversationAccess)
2. Build the Message with a fresh id and timestamp
3. Write it to the record store (failure propagates)
4. Invalidate the conversation's cached message page
5. Publish "message.received" (best effort: failure is logged, never raised)
6. Return the created message (no attachments yet)

A reader that observes the event or a cache miss therefore never sees data
older than the write. A crash between steps 3 and 5 drops the event.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from messaging.application.common.access import ConversationAccess
from messaging.application.common.interfaces import Command, CommandHandler
from messaging.domain.entities.message import Message
from messaging.domain.entities.message_event import MessageEvent
from messaging.domain.exceptions import DomainValidationError
from messaging.domain.ports.event_publisher import EventPublisher
from messaging.domain.ports.repositories import MessageRepository
from messaging.domain.value_objects.conversation_id import ConversationId
from messaging.domain.value_objects.enums import ContentType, SenderType
from messaging.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendMessageCommand(Command[Message]):
    conversation_id: ConversationId
    sender_type: SenderType
    sender_id: str
    content: str
    content_type: ContentType = ContentType.TEXT
    metadata: dict[str, Any] = field(default_factory=dict)


class SendMessageHandler(CommandHandler[Message]):
    def __init__(
        self,
        access: ConversationAccess,
        message_repository: MessageRepository,
        event_publisher: EventPublisher,
    ):
        self._access = access
        self._msg_repo = message_repository
        self._event_publisher = event_publisher

    async def execute(self, command: SendMessageCommand) -> Message:
        if not command.content or not command.content.strip():
            raise DomainValidationError("Message content is required", field="content")
        try:
            sender = UserId(command.sender_id)
        except ValueError as e:
            raise DomainValidationError(str(e), field="sender_id") from e

        await self._access.get_conversation(command.conversation_id, sender)

        try:
            message = Message.create(
                conversation_id=command.conversation_id,
                sender_type=command.sender_type,
                sender_id=command.sender_id,
                content=command.content,
                content_type=command.content_type,
                metadata=command.metadata,
            )
        except ValueError as e:
            raise DomainValidationError(str(e)) from e

        await self._msg_repo.create(message)
        await self._access.invalidate_messages(message.conversation_id)
        await self._publish(message)

        logger.info(
            f"Message sent: id={message.id.value} "
            f"conversation_id={message.conversation_id.value} "
            f"sender_id={message.sender_id} content_type={message.content_type.value}"
        )
        return message

    async def _publish(self, message: Message) -> None:
        try:
            await self._event_publisher.publish_message_event(
                MessageEvent.message_received(message)
            )
        except Exception as e:
            logger.error(
                f"Failed to publish message event for {message.id.value}: {e}"
            )
