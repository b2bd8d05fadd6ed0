"""Read models returned by the tag search."""

from pydantic import computed_field

from chat.domain.model.common import DomainModel
from chat.domain.model.tag import Tag
from chat.domain.value import UserId


class MessageSummary(DomainModel):
    """Condensed message as listed inside a tag group."""

    sender_id: UserId
    message: str
    tags: list[Tag]


class TagGroup(DomainModel):
    """Messages sharing the exact same combination of matched tag ids."""

    tag_combination: list[str]  # Sorted, distinct
    messages: list[MessageSummary]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def tag_id(self) -> list[str]:
        """The tag combination, repeated for callers that read it by this name."""
        return list(self.tag_combination)
