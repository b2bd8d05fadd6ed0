"""Repository interfaces for the chat domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from chat.domain.repository.message import MessageRepository

__all__ = [
    "MessageRepository",
]
