"""Conversation routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query

from chat.application.usecase.message import (
    ListMessagesRequest,
    ListMessagesResponse,
    ListMessagesUseCase,
)
from chat.domain.error import DomainError
from chat.domain.service import JWTService
from chat.interface.api.routes.common import require_user, to_http_error

router = APIRouter(
    prefix="/conversations", tags=["conversations"], route_class=DishkaRoute
)


@router.get("/{conversation_id}/messages", response_model=ListMessagesResponse)
async def list_messages(
    conversation_id: str,
    list_messages_use_case: FromDishka[ListMessagesUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = Query(default=None),
    authorization: str | None = Header(default=None),
) -> ListMessagesResponse:
    """List the most recent messages of a conversation, newest first.

    Args:
        conversation_id: Conversation UUID
        list_messages_use_case: List messages use case from DI
        jwt_service: JWT service from DI
        limit: Maximum number of messages (server default when omitted)
        authorization: Bearer token header

    Returns:
        Messages of the conversation, deleted ones included
    """
    require_user(authorization, jwt_service)

    try:
        return await list_messages_use_case.execute(
            ListMessagesRequest(conversation_id=conversation_id, limit=limit)
        )
    except DomainError as e:
        raise to_http_error(e)
