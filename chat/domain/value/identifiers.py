"""Strongly typed identifiers for chat domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

MessageId = NewType("MessageId", UUID)
ConversationId = NewType("ConversationId", UUID)
UserId = NewType("UserId", UUID)
