"""SQLAlchemy table definitions for the chat message store.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# MESSAGES TABLE
# ============================================================================
messages_table = Table(
    "messages",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("uuid_generate_v4()")),
    # Conversations and users live in other services; no foreign keys
    Column("conversation_id", UUID, nullable=False),
    Column("sender_id", UUID, nullable=False),
    Column("text", Text, nullable=False),
    # Ordered list of {id, type, reference_id}
    Column("tags", JSONB, nullable=False, server_default=text("'[]'::jsonb")),
    # Denormalized from tags for overlap search
    Column("tag_ids", ARRAY(Text), nullable=False, server_default=text("'{}'")),
    Column("likes", ARRAY(Text), nullable=False, server_default=text("'{}'")),
    Column("likes_count", Integer, nullable=False, server_default=text("0")),
    Column("resolved", Boolean, nullable=False, server_default=text("false")),
    Column("deleted", Boolean, nullable=False, server_default=text("false")),
    Column("reactions", JSONB, nullable=False, server_default=text("'[]'::jsonb")),
    Column("created", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")),
    CheckConstraint(
        "likes_count = cardinality(likes)", name="likes_count_matches_likes"
    ),
)

Index(
    "idx_messages_conversation_created",
    messages_table.c.conversation_id,
    messages_table.c.created,
)
Index("idx_messages_tag_ids", messages_table.c.tag_ids, postgresql_using="gin")
