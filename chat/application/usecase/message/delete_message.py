"""Delete message use case."""

from pydantic import BaseModel

from chat.application.usecase.base import BaseUseCase
from chat.domain.service import MessageService
from chat.domain.value import MessageId

from .common import MessageView, parse_id


class DeleteMessageRequest(BaseModel):
    """Delete message request."""

    message_id: str  # UUID string


class DeleteMessageUseCase(BaseUseCase):
    """Use case for soft deleting a message."""

    def __init__(self, message_service: MessageService) -> None:
        self.message_service = message_service

    async def execute(self, request: DeleteMessageRequest) -> MessageView:
        """Execute delete flow.

        Raises:
            NotFoundError: If the message does not exist
        """
        message_id = MessageId(parse_id(request.message_id, "message_id"))
        message = await self.message_service.delete(message_id)
        return MessageView.from_message(message)
