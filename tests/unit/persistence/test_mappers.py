"""Unit tests for row <-> model mappers."""

from uuid import uuid4

from chat.domain.model import Tag
from chat.domain.value import MessageState, TagType, UserId
from chat.persistence.mappers import (
    message_to_dict,
    row_to_message,
    row_to_tag,
    with_references,
)
from tests.conftest import make_message


class TestMessageMappers:
    """Tests for message row mapping."""

    def test_message_to_dict_denormalizes_tag_ids(self):
        """tag_ids mirrors the tag list for overlap search."""
        message = make_message(tag_ids=["A", "B"])

        row = message_to_dict(message)

        assert row["tag_ids"] == ["A", "B"]
        assert row["tags"][0] == {"id": "A", "type": "subTopic", "reference_id": None}
        assert row["deleted"] is False

    def test_row_round_trip_keeps_likes_and_state(self):
        # Arrange
        user = UserId(uuid4())
        message = make_message(state=MessageState.DELETED).liked_by(user)
        row = message_to_dict(message)

        # Act
        restored = row_to_message(row)

        # Assert
        assert row["likes"] == [str(user)]
        assert restored.likes == [user]
        assert restored.likes_count == 1
        assert restored.deleted is True

    def test_row_to_message_accepts_string_ids(self):
        """asyncpg may hand back UUIDs as strings in RETURNING rows."""
        message = make_message()
        row = {**message_to_dict(message), "id": str(message.id)}

        assert row_to_message(row).id == message.id


class TestTagMappers:
    """Tests for tag mapping."""

    def test_row_to_tag_defaults_type(self):
        tag = row_to_tag({"id": "A"})

        assert tag.type == TagType.SUB_TOPIC
        assert tag.reference_id is None

    def test_with_references_keeps_existing(self):
        tags = with_references([Tag(id="A", reference_id="ref"), Tag(id="B")])

        assert tags[0].reference_id == "ref"
        assert tags[1].reference_id
