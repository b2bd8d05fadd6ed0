"""Get messages by tags use case."""

import logfire
from pydantic import BaseModel

from chat.application.usecase.base import BaseUseCase
from chat.domain.service import MessageService
from chat.domain.value import ConversationId

from .common import TagGroupView, TagInput, parse_id


class GetMessagesByTagsRequest(BaseModel):
    """Get messages by tags request."""

    conversation_ids: list[str]  # UUID strings
    tags: list[TagInput]
    limit: int  # Validated by the service


class GetMessagesByTagsUseCase(BaseUseCase):
    """Use case for searching messages grouped by tag combination."""

    def __init__(self, message_service: MessageService) -> None:
        """Initialize get messages by tags use case.

        Args:
            message_service: Message domain service
        """
        self.message_service = message_service

    async def execute(self, request: GetMessagesByTagsRequest) -> list[TagGroupView]:
        """Execute tag search flow.

        Args:
            request: Tag search request

        Returns:
            One group per distinct matching tag combination

        Raises:
            ValidationError: If limit is not positive or an id is malformed
        """
        with logfire.span(
            "get_messages_by_tags.execute",
            conversations=len(request.conversation_ids),
            tags=[tag.id for tag in request.tags],
            limit=request.limit,
        ):
            conversation_ids = [
                ConversationId(parse_id(value, "conversation_ids"))
                for value in request.conversation_ids
            ]
            groups = await self.message_service.get_messages_by_tags(
                conversation_ids,
                [tag.to_tag() for tag in request.tags],
                request.limit,
            )
            return [TagGroupView.from_group(group) for group in groups]
