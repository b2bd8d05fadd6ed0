"""Message entity.

Messages are the persisted unit of a conversation. They own their likes,
resolved flag, tags and lifecycle state. Content is frozen once deleted.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import Field, computed_field, model_validator

from chat.domain.model.common import DomainModel
from chat.domain.model.tag import Tag
from chat.domain.value import ConversationId, MessageId, MessageState, Reference, UserId


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class Message(DomainModel):
    """Message entity.

    Business rules:
    - likes has set semantics and likes_count always equals len(likes)
    - state only moves from ACTIVE to DELETED
    - reactions is reserved and stays empty
    """

    id: MessageId
    conversation_id: ConversationId
    sender_id: UserId
    text: str = Field(min_length=1)
    tags: list[Tag] = Field(default_factory=list)
    likes: list[UserId] = Field(default_factory=list)
    likes_count: int = Field(default=0, ge=0)
    resolved: bool = False
    state: MessageState = MessageState.ACTIVE
    reactions: list[dict[str, Any]] = Field(default_factory=list)
    created: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def validate_likes(self) -> "Message":
        """Validate that likes is a set and the count matches it."""
        if len(set(self.likes)) != len(self.likes):
            raise ValueError("likes must not contain duplicate users")
        if self.likes_count != len(self.likes):
            raise ValueError(
                f"likes_count ({self.likes_count}) does not match likes ({len(self.likes)})"
            )
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def deleted(self) -> bool:
        """Whether the message has been soft deleted."""
        return self.state == MessageState.DELETED

    @computed_field  # type: ignore[prop-decorator]
    @property
    def conversation(self) -> Reference:
        """Reference to the owning conversation."""
        return Reference(id=str(self.conversation_id))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def sender(self) -> Reference:
        """Reference to the authoring user."""
        return Reference(id=str(self.sender_id))

    def is_liked_by(self, user_id: UserId) -> bool:
        return user_id in self.likes

    def liked_by(self, user_id: UserId) -> "Message":
        """Return a copy with user_id added to likes (no-op if present)."""
        if self.is_liked_by(user_id):
            return self
        likes = [*self.likes, user_id]
        return self.model_copy(update={"likes": likes, "likes_count": len(likes)})

    def unliked_by(self, user_id: UserId) -> "Message":
        """Return a copy with user_id removed from likes (no-op if absent)."""
        if not self.is_liked_by(user_id):
            return self
        likes = [u for u in self.likes if u != user_id]
        return self.model_copy(update={"likes": likes, "likes_count": len(likes)})

    def with_resolved(self, resolved: bool) -> "Message":
        return self.model_copy(update={"resolved": resolved})

    def with_tags(self, tags: list[Tag]) -> "Message":
        """Return a copy whose tag list is replaced by tags."""
        return self.model_copy(update={"tags": list(tags)})

    def scrubbed(self, placeholder: str) -> "Message":
        """Return the deleted form of this message.

        Only text and state change; a deleted message is returned as is.
        """
        if self.deleted:
            return self
        return self.model_copy(
            update={"text": placeholder, "state": MessageState.DELETED}
        )
