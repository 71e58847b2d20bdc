"""
Create Attachment Command - Record a stored file against a message.

This handler does NOT verify that the caller owns the message. The upload
endpoint resolves the message through GetMessage (ownership check) and stores
the bytes before issuing this command; keep that order when adding callers.
"""

import logging
from dataclasses import dataclass

from messaging.application.common.interfaces import Command, CommandHandler
from messaging.domain.entities.attachment import Attachment
from messaging.domain.exceptions import DomainValidationError
from messaging.domain.ports.repositories import AttachmentRepository
from messaging.domain.value_objects.enums import AttachmentType
from messaging.domain.value_objects.message_id import MessageId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateAttachmentCommand(Command[Attachment]):
    message_id: MessageId
    url: str
    type: AttachmentType
    size: int
    filename: str


class CreateAttachmentHandler(CommandHandler[Attachment]):
    def __init__(self, attachment_repository: AttachmentRepository):
        self._attachment_repository = attachment_repository

    async def execute(self, command: CreateAttachmentCommand) -> Attachment:
        try:
            attachment = Attachment.create(
                message_id=command.message_id,
                url=command.url,
                type=command.type,
                size=command.size,
                filename=command.filename,
            )
        except ValueError as e:
            raise DomainValidationError(str(e)) from e

        await self._attachment_repository.create(attachment)

        logger.info(
            f"Attachment created: id={attachment.id.value} "
            f"message_id={command.message_id.value} type={attachment.type.value} "
            f"size={attachment.size}"
        )
        return attachment
