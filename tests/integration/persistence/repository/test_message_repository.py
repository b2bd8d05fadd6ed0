"""Integration tests for PostgresMessageRepository.

These tests need a migrated PostgreSQL database (DATABASE__URL) and only
run when RUN_INTEGRATION=1.
"""

import asyncio
import os
from uuid import uuid4

import pytest

from chat.config import Settings
from chat.domain.model import Tag
from chat.domain.repository import MessageRepository
from chat.domain.value import ConversationId, UserId
from chat.persistence.database import create_engine, create_session_factory
from chat.persistence.repository import PostgresMessageRepository
from tests.conftest import make_message
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_INTEGRATION") != "1",
    reason="set RUN_INTEGRATION=1 to run against PostgreSQL",
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})

PLACEHOLDER = "This message has been deleted"


class TestMessageRepositoryIntegration:
    """Integration tests for PostgresMessageRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find_assigns_tag_references(self, integration_env):
        # Arrange
        repo = await integration_env.get(MessageRepository)
        message = make_message(tag_ids=["A", "B"])

        # Act
        await repo.save(message)
        found = await repo.find_by_id(message.id)

        # Assert
        assert found is not None
        assert [tag.id for tag in found.tags] == ["A", "B"]
        assert all(tag.reference_id for tag in found.tags)

    @pytest.mark.asyncio
    async def test_like_is_guarded(self, integration_env):
        """A repeated like leaves likes and count unchanged."""
        # Arrange
        repo = await integration_env.get(MessageRepository)
        message = make_message()
        await repo.save(message)
        user = UserId(uuid4())

        # Act
        await repo.add_like(message.id, user)
        again = await repo.add_like(message.id, user)
        removed = await repo.remove_like(message.id, UserId(uuid4()))

        # Assert
        assert again.likes == [user]
        assert again.likes_count == 1
        assert removed.likes_count == 1

    @pytest.mark.asyncio
    async def test_replace_tags_and_delete(self, integration_env):
        # Arrange
        repo = await integration_env.get(MessageRepository)
        message = make_message(tag_ids=["A", "B"])
        await repo.save(message)

        # Act
        replaced = await repo.replace_tags(
            message.id, [Tag(id="A"), Tag(id="B"), Tag(id="C")]
        )
        deleted = await repo.mark_deleted(message.id, PLACEHOLDER)
        frozen = await repo.replace_tags(message.id, [Tag(id="Z")])

        # Assert
        assert [tag.id for tag in replaced.tags] == ["A", "B", "C"]
        assert deleted.deleted is True
        assert deleted.text == PLACEHOLDER
        assert frozen is None

    @pytest.mark.asyncio
    async def test_find_by_tag_ids_uses_overlap(self, integration_env):
        # Arrange
        repo = await integration_env.get(MessageRepository)
        conversation_id = ConversationId(uuid4())
        m1 = make_message(conversation_id, ["tag1", "tag2"], offset=1)
        m2 = make_message(conversation_id, ["tag3"], offset=2)
        for message in (m1, m2):
            await repo.save(message)

        # Act
        found = await repo.find_by_tag_ids([conversation_id], ["tag1", "tag2"], limit=10)

        # Assert
        assert [m.id for m in found] == [m1.id]

    @pytest.mark.asyncio
    async def test_missing_message_returns_none(self, integration_env):
        repo = await integration_env.get(MessageRepository)
        message_id = make_message().id

        assert await repo.add_like(message_id, UserId(uuid4())) is None
        assert await repo.set_resolved(message_id, True) is None
        assert await repo.mark_deleted(message_id, PLACEHOLDER) is None


class TestConcurrentLikes:
    """Concurrent likes from separate sessions."""

    @pytest.mark.asyncio
    async def test_concurrent_likes_are_all_recorded(self):
        """Every user liking at once ends up in likes exactly once."""
        # Arrange
        settings = Settings()
        engine = create_engine(settings)
        session_factory = create_session_factory(engine)
        message = make_message()
        async with session_factory() as session:
            await PostgresMessageRepository(session).save(message)
            await session.commit()

        users = [UserId(uuid4()) for _ in range(10)]

        async def like(user_id):
            async with session_factory() as session:
                await PostgresMessageRepository(session).add_like(message.id, user_id)
                await session.commit()

        # Act
        try:
            await asyncio.gather(*(like(u) for u in users))
            async with session_factory() as session:
                stored = await PostgresMessageRepository(session).find_by_id(message.id)
        finally:
            await engine.dispose()

        # Assert
        assert set(stored.likes) == set(users)
        assert stored.likes_count == len(users)
