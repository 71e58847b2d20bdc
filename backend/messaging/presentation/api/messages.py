"""
Messages API Router - single-message reads and attachment upload.

POST /messages/{id}/attachments runs three steps in order:
1. GetMessage: the caller must own the message's conversation
2. Store the uploaded bytes (FileStorage)
3. CreateAttachment with the stored reference and the size actually written;
   if that fails the stored file is deleted again before the error propagates
"""

from logging import getLogger

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, File, UploadFile, status

from messaging.application.commands.attachments import (
    CreateAttachmentCommand,
    CreateAttachmentHandler,
)
from messaging.application.dto import AttachmentDTO, MessageDTO
from messaging.application.queries.messages import GetMessageHandler, GetMessageQuery
from messaging.domain.exceptions import DomainValidationError, StorageUnavailableError
from messaging.domain.ports.file_storage import FileStorage
from messaging.domain.value_objects.message_id import MessageId
from messaging.presentation.api.responses import ApiResponse, parse_id, success
from messaging.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)

router = APIRouter(prefix="/messages", tags=["messages"])


def _discard_stored_file(file_storage: FileStorage, url: str) -> None:
    """Remove bytes no attachment record points to; failures are only logged."""
    try:
        file_storage.delete_file(url)
    except StorageUnavailableError as e:
        logger.error(f"Failed to remove orphaned upload {url}: {e}")
    else:
        logger.warning(f"Removed orphaned upload {url} after attachment create failed")


@router.get(
    "/{message_id}",
    response_model=ApiResponse[MessageDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def get_message(
    message_id: str,
    handler: FromDishka[GetMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    message = await handler.execute(
        GetMessageQuery(
            message_id=parse_id(MessageId, message_id),
            user_id=current_user.user_id,
        )
    )
    return success("Message retrieved successfully", MessageDTO.from_entity(message))


@router.post(
    "/{message_id}/attachments",
    response_model=ApiResponse[AttachmentDTO],
    status_code=status.HTTP_201_CREATED,
)
@inject
async def upload_attachment(
    message_id: str,
    get_message_handler: FromDishka[GetMessageHandler],
    create_attachment_handler: FromDishka[CreateAttachmentHandler],
    file_storage: FromDishka[FileStorage],
    current_user: AuthUser = Depends(get_current_user),
    file: UploadFile = File(...),
):
    """Upload a file and attach it to a message the caller owns."""
    message = await get_message_handler.execute(
        GetMessageQuery(
            message_id=parse_id(MessageId, message_id),
            user_id=current_user.user_id,
        )
    )

    if not file.filename:
        raise DomainValidationError("File is required", field="file")
    content = await file.read()

    stored = file_storage.store(content, file.filename, current_user.user_id)

    try:
        attachment = await create_attachment_handler.execute(
            CreateAttachmentCommand(
                message_id=message.id,
                url=stored.url,
                type=stored.type,
                size=stored.size,
                filename=stored.filename,
            )
        )
    except Exception:
        _discard_stored_file(file_storage, stored.url)
        raise
    return success("Attachment created successfully", AttachmentDTO.from_entity(attachment))
