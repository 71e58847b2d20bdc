"""
Conversations API Router - conversation endpoints and the message endpoints
nested under a conversation.

- Receives handlers via Dependency Injection (Dishka)
- Thin layer: only handles HTTP concerns (request/response)
- Domain exceptions propagate to the app-level handlers (fastapi_app.py),
  which map them to status codes and the response envelope

Flow:
  HTTP Request → Router → Command/Query → Handler → Cache / Repository
                                 ↓
  HTTP Response ← Router ← Result ←
"""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Query, status

from messaging.application.commands.conversations import (
    CreateConversationCommand,
    CreateConversationHandler,
    UpdateConversationStatusCommand,
    UpdateConversationStatusHandler,
)
from messaging.application.commands.messages import (
    SendMessageCommand,
    SendMessageHandler,
)
from messaging.application.dto import (
    ConversationDTO,
    ConversationListDTO,
    CreateConversationRequest,
    MessageDTO,
    MessageListDTO,
    SendMessageRequest,
    UpdateConversationStatusRequest,
)
from messaging.application.queries.conversations import (
    GetConversationHandler,
    GetConversationQuery,
    ListConversationsHandler,
    ListConversationsQuery,
)
from messaging.application.queries.messages import (
    ListMessagesHandler,
    ListMessagesQuery,
)
from messaging.config.settings import Config
from messaging.domain.value_objects.conversation_id import ConversationId
from messaging.domain.value_objects.enums import Channel, ConversationStatus
from messaging.domain.value_objects.pagination import (
    ConversationFilters,
    PaginationParams,
)
from messaging.presentation.api.responses import (
    ApiResponse,
    clamp_limit,
    clamp_offset,
    parse_id,
    success,
)
from messaging.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)

router = APIRouter(prefix="/conversations", tags=["conversations"])


# ==================== CONVERSATIONS ====================


@router.get(
    "",
    response_model=ApiResponse[ConversationListDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_conversations(
    handler: FromDishka[ListConversationsHandler],
    current_user: AuthUser = Depends(get_current_user),
    channel: Optional[Channel] = None,
    status_filter: Optional[ConversationStatus] = Query(None, alias="status"),
    limit: int = Config.DEFAULT_CONVERSATION_LIMIT,
    offset: int = 0,
):
    """List the caller's conversations, most recently updated first."""
    filters = ConversationFilters(
        channel=channel,
        status=status_filter,
        limit=clamp_limit(limit),
        offset=clamp_offset(offset),
    )
    conversations = await handler.execute(
        ListConversationsQuery(user_id=current_user.user_id, filters=filters)
    )

    return success(
        "Conversations retrieved successfully",
        ConversationListDTO(
            conversations=[ConversationDTO.from_entity(c) for c in conversations],
            limit=filters.limit,
            offset=filters.offset,
        ),
    )


@router.post(
    "",
    response_model=ApiResponse[ConversationDTO],
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_conversation(
    request: CreateConversationRequest,
    handler: FromDishka[CreateConversationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Create a new active conversation on the given channel."""
    conversation = await handler.execute(
        CreateConversationCommand(user_id=current_user.user_id, channel=request.channel)
    )
    return success(
        "Conversation created successfully", ConversationDTO.from_entity(conversation)
    )


@router.get(
    "/{conversation_id}",
    response_model=ApiResponse[ConversationDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def get_conversation(
    conversation_id: str,
    handler: FromDishka[GetConversationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    conversation = await handler.execute(
        GetConversationQuery(
            conversation_id=parse_id(ConversationId, conversation_id),
            user_id=current_user.user_id,
        )
    )
    return success(
        "Conversation retrieved successfully", ConversationDTO.from_entity(conversation)
    )


@router.patch(
    "/{conversation_id}",
    response_model=ApiResponse[ConversationDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def update_conversation_status(
    conversation_id: str,
    request: UpdateConversationStatusRequest,
    handler: FromDishka[UpdateConversationStatusHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """
    Update conversation status.

    Request: {"status": "active" | "closed" | "archived"}
    """
    conversation = await handler.execute(
        UpdateConversationStatusCommand(
            conversation_id=parse_id(ConversationId, conversation_id),
            user_id=current_user.user_id,
            status=request.status,
        )
    )
    return success(
        "Conversation updated successfully", ConversationDTO.from_entity(conversation)
    )


# ==================== MESSAGES ====================


@router.get(
    "/{conversation_id}/messages",
    response_model=ApiResponse[MessageListDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_messages(
    conversation_id: str,
    handler: FromDishka[ListMessagesHandler],
    current_user: AuthUser = Depends(get_current_user),
    limit: int = Config.DEFAULT_MESSAGE_LIMIT,
    offset: int = 0,
):
    """Messages of a conversation, newest first, each with its attachments."""
    pagination = PaginationParams(limit=clamp_limit(limit), offset=clamp_offset(offset))
    messages = await handler.execute(
        ListMessagesQuery(
            conversation_id=parse_id(ConversationId, conversation_id),
            user_id=current_user.user_id,
            pagination=pagination,
        )
    )
    return success(
        "Messages retrieved successfully",
        MessageListDTO(
            messages=[MessageDTO.from_entity(m) for m in messages],
            limit=pagination.limit,
            offset=pagination.offset,
        ),
    )


@router.post(
    "/{conversation_id}/messages",
    response_model=ApiResponse[MessageDTO],
    status_code=status.HTTP_201_CREATED,
)
@inject
async def send_message(
    conversation_id: str,
    request: SendMessageRequest,
    handler: FromDishka[SendMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """
    Send a message. The sender id is always the authenticated user.

    Request: {"sender_type": "user", "content": "...", "content_type": "text", "metadata": {}}
    """
    message = await handler.execute(
        SendMessageCommand(
            conversation_id=parse_id(ConversationId, conversation_id),
            sender_type=request.sender_type,
            sender_id=current_user.user_id.value,
            content=request.content,
            content_type=request.content_type,
            metadata=request.metadata,
        )
    )
    return success("Message sent successfully", MessageDTO.from_entity(message))
