"""Message routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel

from chat.application.usecase.message import (
    DeleteMessageRequest,
    DeleteMessageUseCase,
    GetMessageRequest,
    GetMessagesByTagsRequest,
    GetMessagesByTagsUseCase,
    GetMessageUseCase,
    LikeMessageRequest,
    LikeMessageUseCase,
    MessageView,
    ResolveMessageRequest,
    ResolveMessageUseCase,
    SendMessageRequest,
    SendMessageUseCase,
    TagGroupView,
    TagInput,
    UnlikeMessageUseCase,
    UpdateMessageTagsRequest,
    UpdateMessageTagsUseCase,
)
from chat.domain.error import DomainError
from chat.domain.service import JWTService
from chat.interface.api.routes.common import require_user, to_http_error

router = APIRouter(prefix="/messages", tags=["messages"], route_class=DishkaRoute)


class SendMessageAPIRequest(BaseModel):
    """API request for sending a message."""

    conversation_id: Optional[str] = None
    text: Optional[str] = None
    tags: list[TagInput] = []


class UpdateTagsAPIRequest(BaseModel):
    """API request for replacing a message's tags."""

    tags: list[TagInput]


class SearchByTagsAPIRequest(BaseModel):
    """API request for a grouped tag search."""

    conversation_ids: list[str]
    tags: list[TagInput]
    limit: int


@router.post("", response_model=MessageView, status_code=status.HTTP_201_CREATED)
async def send_message(
    request: SendMessageAPIRequest,
    send_message_use_case: FromDishka[SendMessageUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> MessageView:
    """Send a message to a conversation.

    The sender is the authenticated caller.

    Args:
        request: Message content
        send_message_use_case: Send message use case from DI
        jwt_service: JWT service from DI
        authorization: Bearer token header

    Returns:
        The created message

    Raises:
        HTTPException: 401 if not authenticated, 400 if conversation or text is missing
    """
    user_id = require_user(authorization, jwt_service)

    try:
        return await send_message_use_case.execute(
            SendMessageRequest(
                conversation_id=request.conversation_id,
                text=request.text,
                tags=request.tags,
                sender_id=user_id,
            )
        )
    except DomainError as e:
        raise to_http_error(e)


@router.post("/search/tags", response_model=list[TagGroupView])
async def search_by_tags(
    request: SearchByTagsAPIRequest,
    get_messages_by_tags_use_case: FromDishka[GetMessagesByTagsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> list[TagGroupView]:
    """Search conversations for tagged messages, grouped by tag combination.

    Example:
        POST /messages/search/tags
        {"conversation_ids": ["..."], "tags": [{"id": "A"}, {"id": "B"}], "limit": 10}

        Response:
        [{"_id": ["A", "B"], "messages": [...], "tag_id": ["A", "B"]}]
    """
    require_user(authorization, jwt_service)

    try:
        return await get_messages_by_tags_use_case.execute(
            GetMessagesByTagsRequest(
                conversation_ids=request.conversation_ids,
                tags=request.tags,
                limit=request.limit,
            )
        )
    except DomainError as e:
        raise to_http_error(e)


@router.get("/{message_id}", response_model=MessageView)
async def get_message(
    message_id: str,
    get_message_use_case: FromDishka[GetMessageUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> MessageView:
    """Get a message by ID. Deleted messages are returned scrubbed."""
    require_user(authorization, jwt_service)

    try:
        return await get_message_use_case.execute(
            GetMessageRequest(message_id=message_id)
        )
    except DomainError as e:
        raise to_http_error(e)


@router.put("/{message_id}/tags", response_model=MessageView)
async def update_tags(
    message_id: str,
    request: UpdateTagsAPIRequest,
    update_message_tags_use_case: FromDishka[UpdateMessageTagsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> MessageView:
    """Replace the tags of a message.

    Raises:
        HTTPException: 404 if the message does not exist, 409 if it was deleted
    """
    require_user(authorization, jwt_service)

    try:
        return await update_message_tags_use_case.execute(
            UpdateMessageTagsRequest(message_id=message_id, tags=request.tags)
        )
    except DomainError as e:
        raise to_http_error(e)


@router.post("/{message_id}/like", response_model=MessageView)
async def like_message(
    message_id: str,
    like_message_use_case: FromDishka[LikeMessageUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> MessageView:
    """Like a message as the authenticated caller."""
    user_id = require_user(authorization, jwt_service)

    try:
        return await like_message_use_case.execute(
            LikeMessageRequest(message_id=message_id, user_id=user_id)
        )
    except DomainError as e:
        raise to_http_error(e)


@router.delete("/{message_id}/like", response_model=MessageView)
async def unlike_message(
    message_id: str,
    unlike_message_use_case: FromDishka[UnlikeMessageUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> MessageView:
    """Remove the authenticated caller's like from a message."""
    user_id = require_user(authorization, jwt_service)

    try:
        return await unlike_message_use_case.execute(
            LikeMessageRequest(message_id=message_id, user_id=user_id)
        )
    except DomainError as e:
        raise to_http_error(e)


@router.post("/{message_id}/resolve", response_model=MessageView)
async def resolve_message(
    message_id: str,
    resolve_message_use_case: FromDishka[ResolveMessageUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> MessageView:
    """Mark a message as resolved."""
    require_user(authorization, jwt_service)

    try:
        return await resolve_message_use_case.execute(
            ResolveMessageRequest(message_id=message_id, resolved=True)
        )
    except DomainError as e:
        raise to_http_error(e)


@router.delete("/{message_id}/resolve", response_model=MessageView)
async def unresolve_message(
    message_id: str,
    resolve_message_use_case: FromDishka[ResolveMessageUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> MessageView:
    """Mark a message as unresolved."""
    require_user(authorization, jwt_service)

    try:
        return await resolve_message_use_case.execute(
            ResolveMessageRequest(message_id=message_id, resolved=False)
        )
    except DomainError as e:
        raise to_http_error(e)


@router.delete("/{message_id}", response_model=MessageView)
async def delete_message(
    message_id: str,
    delete_message_use_case: FromDishka[DeleteMessageUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> MessageView:
    """Soft delete a message.

    The text is replaced by a placeholder. Deleting twice is harmless.
    """
    require_user(authorization, jwt_service)

    try:
        return await delete_message_use_case.execute(
            DeleteMessageRequest(message_id=message_id)
        )
    except DomainError as e:
        raise to_http_error(e)
