"""Domain value objects for the chat message store."""

from chat.domain.value.identifiers import ConversationId, MessageId, UserId
from chat.domain.value.types import MessageState, Reference, TagType

__all__ = [
    # Identifiers
    "ConversationId",
    "MessageId",
    "UserId",
    # Types
    "MessageState",
    "Reference",
    "TagType",
]
