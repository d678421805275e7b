"""SQLAlchemy table definitions for social login.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# STORED IDENTITIES TABLE (one row per provider account)
# ============================================================================
stored_identities_table = Table(
    "stored_identities",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("provider", String(50), nullable=False),  # 'github', 'google', 'facebook'
    Column("provider_id", String(255), nullable=False),  # Subject id at provider
    Column("email", String(255), nullable=True),  # Not unique, may be NULL
    Column("display_name", String(255), nullable=False),
    Column("avatar_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "last_login_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    UniqueConstraint("provider", "provider_id", name="uq_stored_identity_provider"),
)

Index("idx_stored_identities_email", stored_identities_table.c.email)
