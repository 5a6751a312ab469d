"""Create users and analytics tables

Revision ID: 202501150001
Revises:
Create Date: 2025-01-15 00:01:00
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "202501150001"
down_revision = None
branch_labels = None
depends_on = None

user_role_enum = sa.Enum("Admin", "User", name="user_role")
user_status_enum = sa.Enum("Active", "Inactive", name="user_status")


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
        sa.Column("role", user_role_enum, nullable=False, server_default="User"),
        sa.Column("status", user_status_enum, nullable=False, server_default="Active"),
        sa.Column(
            "join_date",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_join_date", "users", ["join_date"])

    op.create_table(
        "analytics",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column(
            "recorded_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column("active_users", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("new_signups", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("sales", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("revenue", sa.Float(), nullable=False, server_default="0"),
    )
    op.create_index("ix_analytics_recorded_at", "analytics", ["recorded_at"])


def downgrade() -> None:
    op.drop_index("ix_analytics_recorded_at", "analytics")
    op.drop_table("analytics")
    op.drop_index("ix_users_join_date", "users")
    op.drop_index("ix_users_email", "users")
    op.drop_table("users")
    user_role_enum.drop(op.get_bind(), checkfirst=True)
    user_status_enum.drop(op.get_bind(), checkfirst=True)
