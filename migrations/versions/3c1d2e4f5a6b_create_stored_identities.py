"""create_stored_identities

Create the stored identity table:
- One row per (provider, provider_id) account
- Unique constraint on the composite key serializes concurrent first logins
- Email is indexed but not unique (NULL allowed on many rows)

Revision ID: 3c1d2e4f5a6b
Revises:
Create Date: 2026-10-19 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1d2e4f5a6b"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Enable required extensions
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # STORED_IDENTITIES table
    # ========================================================================
    op.create_table(
        "stored_identities",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("provider", sa.String(length=50), nullable=False),
        sa.Column("provider_id", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("display_name", sa.String(length=255), nullable=False),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "last_login_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "provider", "provider_id", name="uq_stored_identity_provider"
        ),
    )
    op.create_index(
        "idx_stored_identities_email", "stored_identities", ["email"], unique=False
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_stored_identities_email", table_name="stored_identities")
    op.drop_table("stored_identities")
