"""Request and response pieces shared by the message use cases."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from chat.domain.error import ValidationError
from chat.domain.model import Message, Tag, TagGroup
from chat.domain.value import TagType


def parse_id(value: str, field: str) -> UUID:
    """Parse a UUID string from a request.

    Raises:
        ValidationError: If value is not a valid UUID
    """
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a valid UUID: {value!r}")


class TagInput(BaseModel):
    """Tag as supplied by callers. Unknown keys are ignored."""

    id: str = Field(min_length=1)
    type: TagType = TagType.SUB_TOPIC

    def to_tag(self) -> Tag:
        return Tag(id=self.id, type=self.type)


class TagView(BaseModel):
    """Tag in responses."""

    id: str
    type: TagType


class ReferenceView(BaseModel):
    """Referenced entity summary."""

    id: str


class MessageView(BaseModel):
    """Message as returned to callers."""

    id: str
    text: str
    conversation: ReferenceView
    sender: ReferenceView
    tags: list[TagView]
    likes: list[str]
    likes_count: int
    resolved: bool
    deleted: bool
    reactions: list[dict[str, Any]]
    created: datetime

    @classmethod
    def from_message(cls, message: Message) -> "MessageView":
        return cls(
            id=str(message.id),
            text=message.text,
            conversation=ReferenceView(id=message.conversation.id),
            sender=ReferenceView(id=message.sender.id),
            tags=[TagView(id=tag.id, type=tag.type) for tag in message.tags],
            likes=[str(user_id) for user_id in message.likes],
            likes_count=message.likes_count,
            resolved=message.resolved,
            deleted=message.deleted,
            reactions=message.reactions,
            created=message.created,
        )


class MessageSummaryView(BaseModel):
    """Message inside a tag group."""

    sender_id: str
    message: str
    tags: list[TagView]


class TagGroupView(BaseModel):
    """Tag search group. The combination is serialized as ``_id``."""

    model_config = ConfigDict(populate_by_name=True)

    tag_combination: list[str] = Field(alias="_id")
    messages: list[MessageSummaryView]
    tag_id: list[str]

    @classmethod
    def from_group(cls, group: TagGroup) -> "TagGroupView":
        return cls(
            tag_combination=group.tag_combination,
            messages=[
                MessageSummaryView(
                    sender_id=str(summary.sender_id),
                    message=summary.message,
                    tags=[TagView(id=tag.id, type=tag.type) for tag in summary.tags],
                )
                for summary in group.messages
            ],
            tag_id=group.tag_id,
        )
