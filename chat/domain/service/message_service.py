"""Message domain service."""

from typing import Awaitable, Callable, Optional, Sequence, TypeVar
from uuid import uuid4

import logfire

from chat.config import MessageSettings
from chat.domain.error import (
    ConflictError,
    ContentDeletedError,
    NotFoundError,
    OperationFailedError,
    ValidationError,
)
from chat.domain.model import Message, Tag, TagGroup
from chat.domain.model.message import utc_now
from chat.domain.repository import MessageRepository
from chat.domain.value import ConversationId, MessageId, UserId

from .base import Service
from .tag_aggregator import group_by_tag_combination

T = TypeVar("T")


class MessageService(Service):
    """Domain service for message operations.

    The only entry point that reads or mutates messages. Holds no state
    besides its repository, so it is safe to share between callers.
    """

    def __init__(
        self, message_repository: MessageRepository, settings: MessageSettings
    ) -> None:
        """Initialize message service.

        Args:
            message_repository: Message repository
            settings: Message store settings
        """
        self.message_repository = message_repository
        self.settings = settings

    async def create_message(
        self,
        conversation_id: Optional[ConversationId],
        sender_id: UserId,
        text: Optional[str],
        tags: Optional[Sequence[Tag]] = None,
    ) -> Message:
        """Create a message in a conversation.

        Args:
            conversation_id: Owning conversation
            sender_id: Authenticated author
            text: Message text
            tags: Optional initial tags (defaults to none)

        Returns:
            The stored message

        Raises:
            ValidationError: If conversation_id or text is missing or empty
        """
        with logfire.span(
            "message_service.create_message",
            conversation_id=str(conversation_id) if conversation_id else None,
            sender_id=str(sender_id),
            tag_count=len(tags) if tags else 0,
        ):
            if not conversation_id:
                raise ValidationError("conversation_id is required")
            if not text or not text.strip():
                raise ValidationError("text is required")

            message = Message(
                id=MessageId(uuid4()),
                conversation_id=conversation_id,
                sender_id=sender_id,
                text=text,
                # reference_id is assigned by persistence, never taken from callers
                tags=[Tag(id=tag.id, type=tag.type) for tag in tags or []],
                likes=[],
                likes_count=0,
                resolved=False,
                reactions=[],
                created=utc_now(),
            )

            saved = await self.message_repository.save(message)
            logfire.info(
                "Message created",
                message_id=str(saved.id),
                conversation_id=str(conversation_id),
                sender_id=str(sender_id),
            )
            return saved

    async def get_message(self, message_id: MessageId) -> Message:
        """Get a message by ID.

        Deleted messages are returned with their content scrubbed.

        Args:
            message_id: Message ID

        Returns:
            The message

        Raises:
            NotFoundError: If the message does not exist
        """
        with logfire.span("message_service.get_message", message_id=str(message_id)):
            message = await self.message_repository.find_by_id(message_id)
            if message is None:
                logfire.warn("Message not found", message_id=str(message_id))
                raise NotFoundError("Message", str(message_id))
            return message

    async def list_messages(
        self, conversation_id: ConversationId, limit: Optional[int] = None
    ) -> list[Message]:
        """List the most recent messages of a conversation.

        Args:
            conversation_id: Conversation ID
            limit: Maximum number of messages (capped by settings)

        Returns:
            Messages newest first

        Raises:
            ValidationError: If limit is not positive
        """
        if limit is None:
            limit = self.settings.default_list_limit
        if limit <= 0:
            raise ValidationError("limit must be a positive integer")
        limit = min(limit, self.settings.max_list_limit)

        with logfire.span(
            "message_service.list_messages",
            conversation_id=str(conversation_id),
            limit=limit,
        ):
            messages = await self.message_repository.find_by_conversation(
                conversation_id, limit=limit
            )
            logfire.info(
                "Messages listed",
                conversation_id=str(conversation_id),
                count=len(messages),
            )
            return messages

    async def update_tags(self, message_id: MessageId, tags: Sequence[Tag]) -> Message:
        """Replace the tags of a message.

        The new list replaces the old one entirely; nothing is merged.

        Args:
            message_id: Message ID
            tags: New tag list (may be empty)

        Returns:
            The updated message

        Raises:
            NotFoundError: If the message does not exist
            ContentDeletedError: If the message has been deleted
        """
        with logfire.span(
            "message_service.update_tags",
            message_id=str(message_id),
            tags=[tag.id for tag in tags],
        ):
            updated = await self.message_repository.replace_tags(
                message_id, [Tag(id=tag.id, type=tag.type) for tag in tags]
            )
            if updated is not None:
                logfire.info(
                    "Message tags updated",
                    message_id=str(message_id),
                    tag_count=len(updated.tags),
                )
                return updated

            # Distinguish a missing message from a deleted one
            existing = await self.message_repository.find_by_id(message_id)
            if existing is None:
                logfire.warn("Tag update on non-existent message", message_id=str(message_id))
                raise NotFoundError(
                    "Message",
                    str(message_id),
                    f"Could not update tags on message {message_id}",
                )
            logfire.warn("Tag update on deleted message", message_id=str(message_id))
            raise ContentDeletedError("message", str(message_id))

    async def like(self, message_id: MessageId, user_id: UserId) -> Message:
        """Like a message on behalf of a user.

        Liking twice is a no-op that returns the current state.

        Args:
            message_id: Message ID
            user_id: Liking user

        Returns:
            The current message

        Raises:
            NotFoundError: If the message does not exist
            OperationFailedError: If conflicts persist after all retries
        """
        with logfire.span(
            "message_service.like", message_id=str(message_id), user_id=str(user_id)
        ):
            message = await self._retry_on_conflict(
                "like", lambda: self.message_repository.add_like(message_id, user_id)
            )
            if message is None:
                logfire.warn("Like on non-existent message", message_id=str(message_id))
                raise NotFoundError("Message", str(message_id))

            logfire.info(
                "Message liked",
                message_id=str(message_id),
                user_id=str(user_id),
                likes_count=message.likes_count,
            )
            return message

    async def unlike(self, message_id: MessageId, user_id: UserId) -> Message:
        """Remove a user's like from a message.

        Unliking a message the user never liked is a no-op.

        Args:
            message_id: Message ID
            user_id: Unliking user

        Returns:
            The current message

        Raises:
            NotFoundError: If the message does not exist
            OperationFailedError: If conflicts persist after all retries
        """
        with logfire.span(
            "message_service.unlike", message_id=str(message_id), user_id=str(user_id)
        ):
            message = await self._retry_on_conflict(
                "unlike",
                lambda: self.message_repository.remove_like(message_id, user_id),
            )
            if message is None:
                logfire.warn(
                    "Unlike on non-existent message", message_id=str(message_id)
                )
                raise NotFoundError("Message", str(message_id))

            logfire.info(
                "Message unliked",
                message_id=str(message_id),
                user_id=str(user_id),
                likes_count=message.likes_count,
            )
            return message

    async def resolve(self, message_id: MessageId) -> Message:
        """Mark a message as resolved."""
        return await self._set_resolved(message_id, True)

    async def unresolve(self, message_id: MessageId) -> Message:
        """Mark a message as unresolved."""
        return await self._set_resolved(message_id, False)

    async def _set_resolved(self, message_id: MessageId, resolved: bool) -> Message:
        with logfire.span(
            "message_service.set_resolved",
            message_id=str(message_id),
            resolved=resolved,
        ):
            message = await self.message_repository.set_resolved(message_id, resolved)
            if message is None:
                logfire.warn(
                    "Resolve on non-existent message", message_id=str(message_id)
                )
                raise NotFoundError("Message", str(message_id))

            logfire.info(
                "Message resolved state set",
                message_id=str(message_id),
                resolved=resolved,
            )
            return message

    async def delete(self, message_id: MessageId) -> Message:
        """Soft delete a message.

        The text is replaced by the configured placeholder and the message
        moves to the deleted state for good. Other fields are kept.
        Deleting twice returns the same deleted message.

        Args:
            message_id: Message ID

        Returns:
            The deleted message

        Raises:
            NotFoundError: If the message does not exist
        """
        with logfire.span("message_service.delete", message_id=str(message_id)):
            message = await self.message_repository.mark_deleted(
                message_id, self.settings.deleted_placeholder
            )
            if message is None:
                logfire.warn(
                    "Delete of non-existent message", message_id=str(message_id)
                )
                raise NotFoundError("Message", str(message_id))

            logfire.info("Message deleted", message_id=str(message_id))
            return message

    async def get_messages_by_tags(
        self,
        conversation_ids: Sequence[ConversationId],
        tags: Sequence[Tag],
        limit: int,
    ) -> list[TagGroup]:
        """Search messages by tag and group them by matching tag combination.

        Args:
            conversation_ids: Conversations to search
            tags: Query tags, matched by id
            limit: Cap on the number of groups and messages per group

        Returns:
            Groups of messages, empty if nothing matches

        Raises:
            ValidationError: If limit is not positive
        """
        if limit <= 0:
            raise ValidationError("limit must be a positive integer")

        tag_ids = sorted({tag.id for tag in tags})
        with logfire.span(
            "message_service.get_messages_by_tags",
            conversation_ids=[str(c) for c in conversation_ids],
            tags=tag_ids,
            limit=limit,
        ):
            if not conversation_ids or not tag_ids:
                return []

            candidates = await self.message_repository.find_by_tag_ids(
                conversation_ids,
                tag_ids,
                limit=self.settings.tag_search_scan_limit,
            )
            if len(candidates) >= self.settings.tag_search_scan_limit:
                # Only the oldest candidates are grouped
                logfire.warn(
                    "Tag search candidates truncated",
                    scan_limit=self.settings.tag_search_scan_limit,
                    conversation_ids=[str(c) for c in conversation_ids],
                    tags=tag_ids,
                )
            groups = group_by_tag_combination(candidates, tags, limit)
            logfire.info(
                "Messages grouped by tags",
                candidates=len(candidates),
                groups=len(groups),
            )
            return groups

    async def _retry_on_conflict(
        self, operation: str, action: Callable[[], Awaitable[T]]
    ) -> T:
        """Run action, retrying when the repository reports a conflict.

        Raises:
            OperationFailedError: If every attempt conflicted
        """
        attempts = self.settings.max_conflict_retries
        for attempt in range(1, attempts + 1):
            try:
                return await action()
            except ConflictError as e:
                logfire.warn(
                    "Conflict during message update",
                    operation=operation,
                    attempt=attempt,
                    error=str(e),
                )
        raise OperationFailedError(operation, attempts)
