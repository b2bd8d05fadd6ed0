"""Domain value objects for the chat message store.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import Field

from chat.domain.value.common import ValueObject


class TagType(str, Enum):
    """Kind of topical label attached to a message."""

    SUB_TOPIC = "subTopic"


class MessageState(str, Enum):
    """Lifecycle state of a message.

    Transitions only go from ACTIVE to DELETED.
    """

    ACTIVE = "active"
    DELETED = "deleted"


class Reference(ValueObject):
    """Summary of a referenced entity (sender, conversation).

    Only the id is resolved here; profile enrichment happens elsewhere.
    """

    id: str = Field(min_length=1)
