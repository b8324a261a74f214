"""Mounting structure types.

Revision ID: 002_structure_types
Revises: 001_initial
Create Date: 2025-03-14
"""

from alembic import op
import sqlalchemy as sa

revision = "002_structure_types"
down_revision = "001_initial"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "structure_types",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("l2", sa.Boolean, default=False),
        sa.Column("custom_cost", sa.Float, nullable=False),
        sa.Column("abs_cost", sa.Float, nullable=False),
    )


def downgrade() -> None:
    op.drop_table("structure_types")
