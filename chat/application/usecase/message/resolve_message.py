"""Resolve message use case."""

from pydantic import BaseModel

from chat.application.usecase.base import BaseUseCase
from chat.domain.service import MessageService
from chat.domain.value import MessageId

from .common import MessageView, parse_id


class ResolveMessageRequest(BaseModel):
    """Resolve or unresolve message request."""

    message_id: str  # UUID string
    resolved: bool = True


class ResolveMessageUseCase(BaseUseCase):
    """Use case for setting a message's resolved flag."""

    def __init__(self, message_service: MessageService) -> None:
        """Initialize resolve message use case.

        Args:
            message_service: Message domain service
        """
        self.message_service = message_service

    async def execute(self, request: ResolveMessageRequest) -> MessageView:
        """Execute resolve flow.

        Raises:
            NotFoundError: If the message does not exist
        """
        message_id = MessageId(parse_id(request.message_id, "message_id"))
        if request.resolved:
            message = await self.message_service.resolve(message_id)
        else:
            message = await self.message_service.unresolve(message_id)
        return MessageView.from_message(message)
