"""In-memory message repository for testing."""

from typing import Optional, Sequence

from chat.domain.model import Message, Tag
from chat.domain.repository.message import MessageRepository
from chat.domain.value import ConversationId, MessageId, UserId
from chat.persistence.mappers import with_references


class InMemoryMessageRepository(MessageRepository):
    """In-memory implementation of MessageRepository for testing.

    Each method reads and writes without awaiting in between, so every
    update is atomic with respect to other coroutines.
    """

    def __init__(self) -> None:
        self._messages: dict[MessageId, Message] = {}

    async def save(self, message: Message) -> Message:
        """Insert a new message."""
        message = message.model_copy(update={"tags": with_references(message.tags)})
        self._messages[message.id] = message
        return message

    async def find_by_id(self, message_id: MessageId) -> Optional[Message]:
        """Find a message by ID."""
        return self._messages.get(message_id)

    async def find_by_conversation(
        self,
        conversation_id: ConversationId,
        limit: int = 30,
    ) -> list[Message]:
        """Find the most recent messages of a conversation."""
        messages = [
            m for m in self._messages.values() if m.conversation_id == conversation_id
        ]

        # Newest first; insertion order breaks ties
        messages = list(reversed(messages))
        messages.sort(key=lambda m: m.created, reverse=True)

        return messages[:limit]

    async def find_by_tag_ids(
        self,
        conversation_ids: Sequence[ConversationId],
        tag_ids: Sequence[str],
        limit: int,
    ) -> list[Message]:
        """Find non-deleted messages carrying any of the given tag ids."""
        conversations = set(conversation_ids)
        wanted = set(tag_ids)
        matches = [
            m
            for m in self._messages.values()
            if m.conversation_id in conversations
            and not m.deleted
            and any(tag.id in wanted for tag in m.tags)
        ]
        matches.sort(key=lambda m: m.created)
        return matches[:limit]

    async def replace_tags(
        self, message_id: MessageId, tags: Sequence[Tag]
    ) -> Optional[Message]:
        """Replace the whole tag list of a non-deleted message."""
        message = self._messages.get(message_id)
        if message is None or message.deleted:
            return None
        updated = message.with_tags(with_references(tags))
        self._messages[message_id] = updated
        return updated

    async def add_like(
        self, message_id: MessageId, user_id: UserId
    ) -> Optional[Message]:
        """Append user_id to likes unless it is already there."""
        message = self._messages.get(message_id)
        if message is None:
            return None
        updated = message.liked_by(user_id)
        self._messages[message_id] = updated
        return updated

    async def remove_like(
        self, message_id: MessageId, user_id: UserId
    ) -> Optional[Message]:
        """Remove user_id from likes if it is there."""
        message = self._messages.get(message_id)
        if message is None:
            return None
        updated = message.unliked_by(user_id)
        self._messages[message_id] = updated
        return updated

    async def set_resolved(
        self, message_id: MessageId, resolved: bool
    ) -> Optional[Message]:
        """Set the resolved flag."""
        message = self._messages.get(message_id)
        if message is None:
            return None
        updated = message.with_resolved(resolved)
        self._messages[message_id] = updated
        return updated

    async def mark_deleted(
        self, message_id: MessageId, placeholder: str
    ) -> Optional[Message]:
        """Soft delete a message."""
        message = self._messages.get(message_id)
        if message is None:
            return None
        updated = message.scrubbed(placeholder)
        self._messages[message_id] = updated
        return updated
