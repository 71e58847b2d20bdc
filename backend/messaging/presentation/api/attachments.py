"""Attachments API Router - bare uploads and attachment reads."""

from logging import getLogger

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, File, UploadFile, status

from messaging.application.dto import AttachmentDTO, UploadedFileDTO
from messaging.application.queries.attachments import (
    GetAttachmentHandler,
    GetAttachmentQuery,
)
from messaging.domain.exceptions import DomainValidationError
from messaging.domain.ports.file_storage import FileStorage
from messaging.domain.value_objects.attachment_id import AttachmentId
from messaging.presentation.api.responses import ApiResponse, parse_id, success
from messaging.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)

router = APIRouter(prefix="/attachments", tags=["attachments"])


@router.post(
    "/upload",
    response_model=ApiResponse[UploadedFileDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def upload_file(
    file_storage: FromDishka[FileStorage],
    current_user: AuthUser = Depends(get_current_user),
    file: UploadFile = File(...),
):
    """
    Store a file and return its reference without creating an attachment.

    Response data: {"url": "/uploads/...", "filename": "...", "size": 123, "type": "image"}
    """
    if not file.filename:
        raise DomainValidationError("File is required", field="file")
    content = await file.read()

    stored = file_storage.store(content, file.filename, current_user.user_id)
    logger.info(
        f"File uploaded: url={stored.url} size={stored.size} "
        f"user_id={current_user.user_id.value}"
    )
    return success("File uploaded successfully", UploadedFileDTO.from_stored(stored))


@router.get(
    "/{attachment_id}",
    response_model=ApiResponse[AttachmentDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def get_attachment(
    attachment_id: str,
    handler: FromDishka[GetAttachmentHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    attachment = await handler.execute(
        GetAttachmentQuery(
            attachment_id=parse_id(AttachmentId, attachment_id),
            user_id=current_user.user_id,
        )
    )
    return success(
        "Attachment retrieved successfully", AttachmentDTO.from_entity(attachment)
    )
