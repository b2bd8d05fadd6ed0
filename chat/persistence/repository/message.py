"""PostgreSQL implementation of Message repository."""

from typing import Any, List, Optional, Sequence

import logfire
from sqlalchemy import Text, cast, func, insert, select, update
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from chat.domain.error import ConflictError
from chat.domain.model import Message, Tag
from chat.domain.repository import MessageRepository
from chat.domain.value import ConversationId, MessageId, UserId
from chat.persistence.mappers import (
    message_to_dict,
    row_to_message,
    tag_to_dict,
    with_references,
)
from chat.persistence.tables import messages_table

# serialization_failure, deadlock_detected
CONFLICT_SQLSTATES = frozenset({"40001", "40P01"})


def is_conflict(error: DBAPIError) -> bool:
    """Whether a database error is a transient conflict worth retrying."""
    code = getattr(error.orig, "sqlstate", None) or getattr(error.orig, "pgcode", None)
    return code in CONFLICT_SQLSTATES


class PostgresMessageRepository(MessageRepository):
    """PostgreSQL implementation of MessageRepository.

    Mutations are single guarded UPDATE ... RETURNING statements. The row
    lock taken by UPDATE serializes writers on one message, and the guard
    is re-checked against the latest row version once the lock is held.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _update_returning(self, stmt: Any) -> Optional[Message]:
        """Run an UPDATE ... RETURNING inside a savepoint.

        A conflict only rolls back the savepoint, so the caller can retry
        in the same session.

        Raises:
            ConflictError: On serialization failure or deadlock
        """
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
                row = result.fetchone()
        except DBAPIError as e:
            if is_conflict(e):
                raise ConflictError(str(e.orig)) from e
            raise
        return row_to_message(row._asdict()) if row else None

    async def save(self, message: Message) -> Message:
        """Insert a new message."""
        message = message.model_copy(update={"tags": with_references(message.tags)})
        stmt = (
            insert(messages_table)
            .values(**message_to_dict(message))
            .returning(messages_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_message(row._asdict()) if row else message

    async def find_by_id(self, message_id: MessageId) -> Optional[Message]:
        """Find a message by ID."""
        stmt = select(messages_table).where(messages_table.c.id == message_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_message(row._asdict()) if row else None

    async def find_by_conversation(
        self,
        conversation_id: ConversationId,
        limit: int = 30,
    ) -> List[Message]:
        """Find the most recent messages of a conversation."""
        stmt = (
            select(messages_table)
            .where(messages_table.c.conversation_id == conversation_id)
            .order_by(messages_table.c.created.desc(), messages_table.c.id.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_message(row._asdict()) for row in result.fetchall()]

    async def find_by_tag_ids(
        self,
        conversation_ids: Sequence[ConversationId],
        tag_ids: Sequence[str],
        limit: int,
    ) -> List[Message]:
        """Find non-deleted messages carrying any of the given tag ids."""
        if not conversation_ids or not tag_ids:
            return []

        with logfire.span(
            "message_repository.find_by_tag_ids",
            conversations=len(conversation_ids),
            tag_ids=list(tag_ids),
        ):
            stmt = (
                select(messages_table)
                .where(messages_table.c.conversation_id.in_(list(conversation_ids)))
                .where(messages_table.c.deleted.is_(False))
                # tag_ids && :tag_ids, served by the GIN index
                .where(messages_table.c.tag_ids.overlap(list(tag_ids)))
                .order_by(messages_table.c.created, messages_table.c.id)
                .limit(limit)
            )
            result = await self.session.execute(stmt)
            return [row_to_message(row._asdict()) for row in result.fetchall()]

    async def replace_tags(
        self, message_id: MessageId, tags: Sequence[Tag]
    ) -> Optional[Message]:
        """Replace the whole tag list of a non-deleted message."""
        tags = with_references(tags)
        stmt = (
            update(messages_table)
            .where(messages_table.c.id == message_id)
            .where(messages_table.c.deleted.is_(False))
            .values(
                tags=[tag_to_dict(tag) for tag in tags],
                tag_ids=[tag.id for tag in tags],
            )
            .returning(messages_table)
        )
        return await self._update_returning(stmt)

    async def add_like(
        self, message_id: MessageId, user_id: UserId
    ) -> Optional[Message]:
        """Append user_id to likes unless it is already there."""
        user = str(user_id)
        stmt = (
            update(messages_table)
            .where(messages_table.c.id == message_id)
            .where(~messages_table.c.likes.contains([user]))
            .values(
                likes=func.array_append(messages_table.c.likes, cast(user, Text)),
                likes_count=messages_table.c.likes_count + 1,
            )
            .returning(messages_table)
        )
        updated = await self._update_returning(stmt)
        if updated is not None:
            return updated

        # Already liked, or missing
        return await self.find_by_id(message_id)

    async def remove_like(
        self, message_id: MessageId, user_id: UserId
    ) -> Optional[Message]:
        """Remove user_id from likes if it is there."""
        user = str(user_id)
        stmt = (
            update(messages_table)
            .where(messages_table.c.id == message_id)
            .where(messages_table.c.likes.contains([user]))
            .values(
                likes=func.array_remove(messages_table.c.likes, cast(user, Text)),
                likes_count=messages_table.c.likes_count - 1,
            )
            .returning(messages_table)
        )
        updated = await self._update_returning(stmt)
        if updated is not None:
            return updated

        # Not liked, or missing
        return await self.find_by_id(message_id)

    async def set_resolved(
        self, message_id: MessageId, resolved: bool
    ) -> Optional[Message]:
        """Set the resolved flag."""
        stmt = (
            update(messages_table)
            .where(messages_table.c.id == message_id)
            .values(resolved=resolved)
            .returning(messages_table)
        )
        return await self._update_returning(stmt)

    async def mark_deleted(
        self, message_id: MessageId, placeholder: str
    ) -> Optional[Message]:
        """Soft delete a message."""
        stmt = (
            update(messages_table)
            .where(messages_table.c.id == message_id)
            .where(messages_table.c.deleted.is_(False))
            .values(deleted=True, text=placeholder)
            .returning(messages_table)
        )
        updated = await self._update_returning(stmt)
        if updated is not None:
            return updated

        # Already deleted (unchanged), or missing
        return await self.find_by_id(message_id)
