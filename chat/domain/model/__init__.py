"""Domain model entities for the chat message store."""

from chat.domain.model.message import Message
from chat.domain.model.tag import Tag
from chat.domain.model.tag_group import MessageSummary, TagGroup

__all__ = [
    "Message",
    "MessageSummary",
    "Tag",
    "TagGroup",
]
