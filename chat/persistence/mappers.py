"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable, List
from uuid import UUID, uuid4

from chat.domain.model import Message, Tag
from chat.domain.value import ConversationId, MessageId, MessageState, TagType, UserId


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_tag(data: Dict[str, Any]) -> Tag:
    """Convert a stored tag object to a Tag.

    Args:
        data: Tag as stored in the tags JSON column

    Returns:
        Tag value
    """
    return Tag(
        id=data["id"],
        type=TagType(data.get("type", TagType.SUB_TOPIC.value)),
        reference_id=data.get("reference_id"),
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert a Tag to its stored JSON form."""
    return {"id": tag.id, "type": tag.type.value, "reference_id": tag.reference_id}


def with_references(tags: Iterable[Tag]) -> List[Tag]:
    """Assign a reference id to every tag that does not have one yet."""
    return [
        tag
        if tag.reference_id
        else tag.model_copy(update={"reference_id": uuid4().hex})
        for tag in tags
    ]


def row_to_message(row: Dict[str, Any]) -> Message:
    """Convert database row to Message domain model.

    Args:
        row: Database row as dict

    Returns:
        Message domain model
    """
    likes = row.get("likes") or []
    return Message(
        id=MessageId(_as_uuid(row["id"])),
        conversation_id=ConversationId(_as_uuid(row["conversation_id"])),
        sender_id=UserId(_as_uuid(row["sender_id"])),
        text=row["text"],
        tags=[row_to_tag(t) for t in row.get("tags") or []],
        likes=[UserId(_as_uuid(u)) for u in likes],
        likes_count=row["likes_count"],
        resolved=row["resolved"],
        state=MessageState.DELETED if row["deleted"] else MessageState.ACTIVE,
        reactions=row.get("reactions") or [],
        created=row["created"],
    )


def message_to_dict(message: Message) -> Dict[str, Any]:
    """Convert Message domain model to database dict.

    Args:
        message: Message domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": message.id,
        "conversation_id": message.conversation_id,
        "sender_id": message.sender_id,
        "text": message.text,
        "tags": [tag_to_dict(tag) for tag in message.tags],
        "tag_ids": [tag.id for tag in message.tags],
        "likes": [str(user_id) for user_id in message.likes],
        "likes_count": message.likes_count,
        "resolved": message.resolved,
        "deleted": message.deleted,
        "reactions": message.reactions,
        "created": message.created,
    }
