"""SQLAlchemy table definitions for Asklet.

Tables are used with SQLAlchemy Core; rows are mapped to the immutable
domain models in ``mappers``. They match the schema defined in Alembic
migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("username", String(40), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", Text, nullable=False),
    Column("role", String(20), nullable=False, server_default="user"),  # 'user', 'admin'
    Column("avatar_url", Text, nullable=True),
    Column("reputation", Integer, nullable=False, server_default="0"),  # No floor
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("title", String(400), nullable=False),
    Column("description", Text, nullable=False),
    Column("tags", ARRAY(String(35)), nullable=False, server_default="{}"),
    Column("author_id", UUID, ForeignKey("users.id"), nullable=False),
    # Voter IDs; a voter is never in both arrays
    Column("upvotes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("downvotes", ARRAY(UUID), nullable=False, server_default="{}"),
    # Not a foreign key: answers reference questions, and the pointer is
    # kept consistent with answers.is_accepted by the application
    Column("accepted_answer_id", UUID, nullable=True),
    Column("views", Integer, nullable=False, server_default="0"),
    # Bumped on every vote write; guards concurrent vote updates
    Column("version", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

Index("idx_questions_author_id", questions_table.c.author_id)
Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index("idx_questions_tags", questions_table.c.tags, postgresql_using="gin")

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("content", Text, nullable=False),
    Column("upvotes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("downvotes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("is_accepted", Boolean, nullable=False, server_default="false"),
    Column("version", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

Index("idx_answers_question_id", answers_table.c.question_id)
Index("idx_answers_author_id", answers_table.c.author_id)
# At most one accepted answer per question
Index(
    "uq_answers_one_accepted_per_question",
    answers_table.c.question_id,
    unique=True,
    postgresql_where=answers_table.c.is_accepted,
)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column(
        "recipient_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("sender_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("type", String(20), nullable=False),  # 'answer', 'accept', 'comment', 'mention'
    Column("message", Text, nullable=False),
    Column(
        "related_question_id",
        UUID,
        ForeignKey("questions.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "related_answer_id",
        UUID,
        ForeignKey("answers.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

Index(
    "idx_notifications_recipient_created",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("name", String(35), nullable=False, unique=True),
    Column("description", Text, nullable=False, server_default=""),
    Column("question_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)
