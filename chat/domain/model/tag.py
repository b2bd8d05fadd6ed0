"""Tag attached to a message."""

from typing import Optional

from pydantic import Field

from chat.domain.model.common import DomainModel
from chat.domain.value import TagType


class Tag(DomainModel):
    """Topical label attached to a message.

    Tags are caller-supplied labels, unique only within a message by
    convention. Neither the id length nor the number of tags is capped.
    A message's tag list is always replaced as a whole.
    """

    id: str = Field(min_length=1)
    type: TagType = TagType.SUB_TOPIC
    reference_id: Optional[str] = None  # Assigned by persistence, never by callers
