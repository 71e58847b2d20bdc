"""
Get Attachment Query.

An attachment is visible iff its parent message is, i.e. iff the caller owns
the conversation the message belongs to.
"""

from dataclasses import dataclass

from messaging.application.common.access import ConversationAccess
from messaging.application.common.interfaces import Query, QueryHandler
from messaging.domain.entities.attachment import Attachment
from messaging.domain.exceptions import NotFoundOrDeniedError
from messaging.domain.ports.repositories import AttachmentRepository
from messaging.domain.value_objects.attachment_id import AttachmentId
from messaging.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class GetAttachmentQuery(Query[Attachment]):
    attachment_id: AttachmentId
    user_id: UserId


class GetAttachmentHandler(QueryHandler[Attachment]):
    def __init__(
        self, access: ConversationAccess, attachment_repository: AttachmentRepository
    ):
        self._access = access
        self._attachment_repository = attachment_repository

    async def execute(self, query: GetAttachmentQuery) -> Attachment:
        attachment = await self._attachment_repository.get_by_id(query.attachment_id)
        if attachment is None:
            raise NotFoundOrDeniedError()

        await self._access.get_message(attachment.message_id, query.user_id)
        return attachment
