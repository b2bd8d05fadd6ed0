"""Message repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from chat.domain.model import Message, Tag
from chat.domain.value import ConversationId, MessageId, UserId


class MessageRepository(ABC):
    """Repository for Message entity.

    Defines the contract for message persistence operations.
    Every mutating method is a single atomic update of one message and
    returns None when the message does not exist. Implementations may raise
    ConflictError for transient persistence conflicts.
    """

    @abstractmethod
    async def save(self, message: Message) -> Message:
        """Insert a new message.

        Args:
            message: The message to store

        Returns:
            The stored message
        """
        pass

    @abstractmethod
    async def find_by_id(self, message_id: MessageId) -> Optional[Message]:
        """Find a message by ID.

        Args:
            message_id: The message's unique identifier

        Returns:
            The message if found (deleted or not), None otherwise
        """
        pass

    @abstractmethod
    async def find_by_conversation(
        self,
        conversation_id: ConversationId,
        limit: int = 30,
    ) -> List[Message]:
        """Find the most recent messages of a conversation.

        Args:
            conversation_id: The conversation ID
            limit: Maximum number of messages to return

        Returns:
            Messages newest first, deleted messages included
        """
        pass

    @abstractmethod
    async def find_by_tag_ids(
        self,
        conversation_ids: Sequence[ConversationId],
        tag_ids: Sequence[str],
        limit: int,
    ) -> List[Message]:
        """Find non-deleted messages carrying any of the given tag ids.

        Args:
            conversation_ids: Conversations to search
            tag_ids: Tag ids to match (any overlap)
            limit: Maximum number of candidates to scan

        Returns:
            Matching messages in creation order
        """
        pass

    @abstractmethod
    async def replace_tags(
        self, message_id: MessageId, tags: Sequence[Tag]
    ) -> Optional[Message]:
        """Replace the whole tag list of a message.

        Args:
            message_id: The message ID
            tags: The new tag list

        Returns:
            The updated message, None if it does not exist
        """
        pass

    @abstractmethod
    async def add_like(
        self, message_id: MessageId, user_id: UserId
    ) -> Optional[Message]:
        """Add a user to a message's likes if not already present.

        The membership check and the write happen in one atomic step and
        likes_count is kept equal to the number of likes.

        Args:
            message_id: The message ID
            user_id: The liking user

        Returns:
            The current message (updated or unchanged), None if it does not exist
        """
        pass

    @abstractmethod
    async def remove_like(
        self, message_id: MessageId, user_id: UserId
    ) -> Optional[Message]:
        """Remove a user from a message's likes if present.

        Args:
            message_id: The message ID
            user_id: The unliking user

        Returns:
            The current message (updated or unchanged), None if it does not exist
        """
        pass

    @abstractmethod
    async def set_resolved(
        self, message_id: MessageId, resolved: bool
    ) -> Optional[Message]:
        """Set the resolved flag.

        Args:
            message_id: The message ID
            resolved: New value of the flag

        Returns:
            The updated message, None if it does not exist
        """
        pass

    @abstractmethod
    async def mark_deleted(
        self, message_id: MessageId, placeholder: str
    ) -> Optional[Message]:
        """Soft delete a message, replacing its text with placeholder.

        Deleting an already deleted message leaves it unchanged.

        Args:
            message_id: The message ID
            placeholder: Text stored in place of the original content

        Returns:
            The deleted message, None if it does not exist
        """
        pass
