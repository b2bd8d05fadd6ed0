"""PostgreSQL repository implementations."""

from chat.persistence.repository.message import PostgresMessageRepository

__all__ = [
    "PostgresMessageRepository",
]
