"""Like and unlike message use cases."""

from pydantic import BaseModel

from chat.application.usecase.base import BaseUseCase
from chat.domain.service import MessageService
from chat.domain.value import MessageId, UserId

from .common import MessageView, parse_id


class LikeMessageRequest(BaseModel):
    """Like or unlike message request."""

    message_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class LikeMessageUseCase(BaseUseCase):
    """Use case for liking a message."""

    def __init__(self, message_service: MessageService) -> None:
        """Initialize like message use case.

        Args:
            message_service: Message domain service
        """
        self.message_service = message_service

    async def execute(self, request: LikeMessageRequest) -> MessageView:
        """Execute like flow. Liking twice has no further effect.

        Raises:
            NotFoundError: If the message does not exist
        """
        message = await self.message_service.like(
            MessageId(parse_id(request.message_id, "message_id")),
            UserId(parse_id(request.user_id, "user_id")),
        )
        return MessageView.from_message(message)


class UnlikeMessageUseCase(BaseUseCase):
    """Use case for removing a like from a message."""

    def __init__(self, message_service: MessageService) -> None:
        """Initialize unlike message use case.

        Args:
            message_service: Message domain service
        """
        self.message_service = message_service

    async def execute(self, request: LikeMessageRequest) -> MessageView:
        """Execute unlike flow. Unliking without a like is a no-op.

        Raises:
            NotFoundError: If the message does not exist
        """
        message = await self.message_service.unlike(
            MessageId(parse_id(request.message_id, "message_id")),
            UserId(parse_id(request.user_id, "user_id")),
        )
        return MessageView.from_message(message)
