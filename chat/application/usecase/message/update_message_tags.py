"""Update message tags use case."""

from pydantic import BaseModel

from chat.application.usecase.base import BaseUseCase
from chat.domain.service import MessageService
from chat.domain.value import MessageId

from .common import MessageView, TagInput, parse_id


class UpdateMessageTagsRequest(BaseModel):
    """Update message tags request."""

    message_id: str  # UUID string
    tags: list[TagInput]  # Replaces the existing tags


class UpdateMessageTagsUseCase(BaseUseCase):
    """Use case for replacing a message's tags."""

    def __init__(self, message_service: MessageService) -> None:
        """Initialize update message tags use case.

        Args:
            message_service: Message domain service
        """
        self.message_service = message_service

    async def execute(self, request: UpdateMessageTagsRequest) -> MessageView:
        """Execute update tags flow.

        Raises:
            NotFoundError: If the message does not exist
            ContentDeletedError: If the message has been deleted
        """
        message_id = MessageId(parse_id(request.message_id, "message_id"))
        message = await self.message_service.update_tags(
            message_id, [tag.to_tag() for tag in request.tags]
        )
        return MessageView.from_message(message)
