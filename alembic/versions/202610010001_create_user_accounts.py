"""Create role catalog and user accounts

Revision ID: 202610010001
Revises:
Create Date: 2026-10-01 00:01:00
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op
from seatsync.domain.reference_data import ROLE_DEFINITIONS

revision = "202610010001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    role_table = op.create_table(
        "role",
        sa.Column("name", sa.String(length=32), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("name", name="pk_role"),
    )

    op.create_table(
        "user_account",
        sa.Column("user_id", sa.String(length=36), nullable=False),
        sa.Column("full_name", sa.String(length=128), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.PrimaryKeyConstraint("user_id", name="pk_user_account"),
        # Authoritative email uniqueness; registration pre-checks are only a fast path
        sa.UniqueConstraint("email", name="uq_user_account_email"),
    )

    op.create_table(
        "user_account_role",
        sa.Column("user_id", sa.String(length=36), nullable=False),
        sa.Column("role_name", sa.String(length=32), nullable=False),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["user_account.user_id"],
            name="fk_user_account_role_user_id_user_account",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["role_name"],
            ["role.name"],
            name="fk_user_account_role_role_name_role",
        ),
        sa.PrimaryKeyConstraint("user_id", "role_name", name="pk_user_account_role"),
    )

    op.bulk_insert(role_table, ROLE_DEFINITIONS)


def downgrade() -> None:
    op.drop_table("user_account_role")
    op.drop_table("user_account")
    op.drop_table("role")
