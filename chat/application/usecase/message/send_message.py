"""Send message use case."""

from typing import Optional

from pydantic import BaseModel

from chat.application.usecase.base import BaseUseCase
from chat.domain.service import MessageService
from chat.domain.value import ConversationId, UserId

from .common import MessageView, TagInput, parse_id


class SendMessageRequest(BaseModel):
    """Send message request."""

    conversation_id: Optional[str] = None  # UUID string, validated by the service
    text: Optional[str] = None
    tags: list[TagInput] = []
    sender_id: str  # User ID from authenticated user


class SendMessageUseCase(BaseUseCase):
    """Use case for sending a message to a conversation."""

    def __init__(self, message_service: MessageService) -> None:
        """Initialize send message use case.

        Args:
            message_service: Message domain service
        """
        self.message_service = message_service

    async def execute(self, request: SendMessageRequest) -> MessageView:
        """Execute send message flow.

        Args:
            request: Send message request

        Returns:
            The created message

        Raises:
            ValidationError: If conversation or text is missing, or an id is malformed
        """
        conversation_id = (
            ConversationId(parse_id(request.conversation_id, "conversation_id"))
            if request.conversation_id
            else None
        )
        sender_id = UserId(parse_id(request.sender_id, "sender_id"))

        message = await self.message_service.create_message(
            conversation_id=conversation_id,
            sender_id=sender_id,
            text=request.text,
            tags=[tag.to_tag() for tag in request.tags],
        )
        return MessageView.from_message(message)
