"""Add app_user table with avatar identity fields

Revision ID: 3a9d1c7e5b20
Revises:
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa


revision = "3a9d1c7e5b20"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "app_user",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("name", sa.String(length=128), nullable=True),
        sa.Column("avatar_hue", sa.Integer(), nullable=False),
        sa.Column("avatar_pattern", sa.String(length=128), nullable=False),
        sa.Column("initials", sa.String(length=8), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
        sa.CheckConstraint("avatar_hue >= 0 AND avatar_hue < 360", name="ck_app_user_avatar_hue_range"),
    )


def downgrade() -> None:
    op.drop_table("app_user")
