"""Unit tests for settings."""

import pytest
from pydantic import ValidationError

from chat.config import MessageSettings, Settings


class TestSettings:
    """Tests for environment driven settings."""

    def test_nested_values_from_environment(self, monkeypatch):
        """Nested settings are read with the __ delimiter."""
        monkeypatch.setenv("MESSAGES__MAX_CONFLICT_RETRIES", "5")
        monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://u:p@db:5432/chat")

        settings = Settings()

        assert settings.messages.max_conflict_retries == 5
        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/chat"

    def test_message_defaults(self):
        settings = MessageSettings()

        assert settings.deleted_placeholder == "This message has been deleted"
        assert settings.max_conflict_retries == 3

    def test_retries_must_be_positive(self):
        with pytest.raises(ValidationError):
            MessageSettings(max_conflict_retries=0)
