"""List messages use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from chat.application.usecase.base import BaseUseCase
from chat.domain.service import MessageService
from chat.domain.value import ConversationId

from .common import MessageView, parse_id


class ListMessagesRequest(BaseModel):
    """List messages request."""

    conversation_id: str  # UUID string
    limit: Optional[int] = None


class ListMessagesResponse(BaseModel):
    """List messages response."""

    messages: list[MessageView]


class ListMessagesUseCase(BaseUseCase):
    """Use case for listing the latest messages of a conversation."""

    def __init__(self, message_service: MessageService) -> None:
        """Initialize list messages use case.

        Args:
            message_service: Message domain service
        """
        self.message_service = message_service

    async def execute(self, request: ListMessagesRequest) -> ListMessagesResponse:
        """Execute list messages flow.

        Args:
            request: List messages request

        Returns:
            Messages newest first
        """
        with logfire.span(
            "list_messages.execute",
            conversation_id=request.conversation_id,
            limit=request.limit,
        ):
            conversation_id = ConversationId(
                parse_id(request.conversation_id, "conversation_id")
            )
            messages = await self.message_service.list_messages(
                conversation_id, limit=request.limit
            )
            return ListMessagesResponse(
                messages=[MessageView.from_message(m) for m in messages]
            )
