"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence
from uuid import uuid4

import logfire

from chat.domain.model import Message, Tag
from chat.domain.value import ConversationId, MessageId, MessageState, UserId

# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_message(
    conversation_id: Optional[ConversationId] = None,
    tag_ids: Sequence[str] = (),
    text: str = "hello",
    sender_id: Optional[UserId] = None,
    offset: int = 0,
    state: MessageState = MessageState.ACTIVE,
) -> Message:
    """Helper to build a message for tests.

    Args:
        conversation_id: Owning conversation (random if omitted)
        tag_ids: Ids of subTopic tags to attach
        text: Message text
        sender_id: Author (random if omitted)
        offset: Seconds after BASE_TIME, controls creation order
        state: Lifecycle state

    Returns:
        A message with no likes
    """
    return Message(
        id=MessageId(uuid4()),
        conversation_id=conversation_id or ConversationId(uuid4()),
        sender_id=sender_id or UserId(uuid4()),
        text=text,
        tags=[Tag(id=tag_id) for tag_id in tag_ids],
        likes=[],
        likes_count=0,
        resolved=False,
        state=state,
        reactions=[],
        created=BASE_TIME + timedelta(seconds=offset),
    )
