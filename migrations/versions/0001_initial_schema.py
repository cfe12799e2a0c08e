"""initial schema

Revision ID: 0001
Revises:
Create Date: 2025-06-02 10:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "user_accounts",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_user_accounts_email", "user_accounts", ["email"], unique=True)

    op.create_table(
        "contact_submissions",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=32), nullable=False),
        sa.Column("address", sa.String(length=500), nullable=False),
        sa.Column("contact_preference", sa.String(length=20), nullable=False),
        sa.Column("requirement_type", sa.String(length=50), nullable=False),
        sa.Column("details_checked", sa.Boolean(), nullable=False),
        sa.Column("submitted_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_contact_submissions_email", "contact_submissions", ["email"], unique=True)

    op.create_table(
        "password_reset_tokens",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("pin", sa.String(length=16), nullable=False),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
        sa.Column("used", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_password_reset_tokens_email", "password_reset_tokens", ["email"])
    op.create_index("ix_password_reset_tokens_expires_at", "password_reset_tokens", ["expires_at"])
    op.create_index(
        "uq_password_reset_tokens_active_email",
        "password_reset_tokens",
        ["email"],
        unique=True,
        postgresql_where=sa.text("used = false"),
    )

    op.create_table(
        "engineer_profiles",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("engineer_id", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("profile_picture_url", sa.String(length=500), nullable=True),
        sa.Column("specialization", sa.String(length=100), nullable=False),
        sa.Column("experience", sa.Integer(), nullable=True),
        sa.Column("location", sa.String(length=200), nullable=True),
        sa.Column("contact", sa.JSON(), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("qualifications", sa.JSON(), nullable=False),
        sa.Column("project_highlights", sa.JSON(), nullable=False),
        sa.Column("videos", sa.JSON(), nullable=False),
        sa.Column("services_offered", sa.JSON(), nullable=False),
    )
    op.create_index("ix_engineer_profiles_engineer_id", "engineer_profiles", ["engineer_id"], unique=True)


def downgrade() -> None:
    op.drop_table("engineer_profiles")
    op.drop_table("password_reset_tokens")
    op.drop_table("contact_submissions")
    op.drop_table("user_accounts")
