"""
Create the duty table.

Revision ID: 20250301_000000_create_duty_table
Revises:
Create Date: 2025-03-01 00:00:00
"""

import sqlalchemy as sa

from alembic import op  # type: ignore[reportMissingImports]

# revision identifiers, used by Alembic.
revision = "20250301_000000_create_duty_table"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "duty",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id", name="duty_pkey"),
    )


def downgrade() -> None:
    op.drop_table("duty")
