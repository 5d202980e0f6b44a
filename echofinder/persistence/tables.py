"""SQLAlchemy table definitions for EchoFinder.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, Index, MetaData, String, Table, func
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("email", String(320), nullable=False),
    Column("display_name", String(255), nullable=True),
    Column("role", String(20), nullable=False, server_default="USER"),
    Column("status", String(20), nullable=False, server_default="PENDING"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
)

# Email uniqueness is case-insensitive
Index("uq_users_email_lower", func.lower(users_table.c.email), unique=True)

# ============================================================================
# INVITES TABLE
# ============================================================================
invites_table = Table(
    "invites",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("email", String(320), nullable=False),
    Column("token_hash", String(255), nullable=False, unique=True),
    Column("invited_role", String(20), nullable=False, server_default="USER"),
    # Weak reference: inviters are looked up, not joined
    Column("inviter_id", UUID, nullable=False),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("used_at", TIMESTAMP(timezone=True), nullable=True),
    Column("revoked_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
)

Index(
    "idx_invites_inviter_created",
    invites_table.c.inviter_id,
    invites_table.c.created_at.desc(),
)
