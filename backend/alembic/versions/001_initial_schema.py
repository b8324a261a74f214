"""Equipment catalog and quote tables.

Revision ID: 001_initial
Revises:
Create Date: 2025-03-01
"""

from alembic import op
import sqlalchemy as sa

revision = "001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Catalog
    op.create_table(
        "panels",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("brand", sa.String(255), nullable=False),
        sa.Column("power", sa.Integer, nullable=False),
        sa.Column("price", sa.Float, nullable=False),
        sa.Column("default_choice", sa.Boolean, default=False),
        sa.Column("availability", sa.Boolean, default=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        "inverters",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("brand", sa.String(255), nullable=False),
        sa.Column("power", sa.Float, nullable=False),
        sa.Column("price", sa.Float, nullable=False),
        sa.Column("availability", sa.Boolean, default=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        "bracket_costs",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("min_size", sa.Float, nullable=False),
        sa.Column("max_size", sa.Float, nullable=False),
        sa.Column("dc_cable", sa.Float, nullable=False),
        sa.Column("ac_cable", sa.Float, nullable=False),
        sa.Column("accessories", sa.Float, nullable=False),
    )

    op.create_table(
        "variable_costs",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("cost_name", sa.String(100), nullable=False, unique=True),
        sa.Column("cost", sa.Float, nullable=False),
    )

    # Quotes
    op.create_table(
        "quotes",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("bill_reference", sa.String(100)),
        sa.Column("monthly_usage", sa.Float),
        sa.Column("system_size", sa.Float, nullable=False),
        sa.Column("total_cost", sa.Float, nullable=False),
        sa.Column("panel_power", sa.Integer),
        sa.Column("inverter_size", sa.Float),
        sa.Column("breakdown", sa.JSON),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_quotes_bill_reference", "quotes", ["bill_reference"])


def downgrade() -> None:
    op.drop_index("ix_quotes_bill_reference", table_name="quotes")
    op.drop_table("quotes")
    op.drop_table("variable_costs")
    op.drop_table("bracket_costs")
    op.drop_table("inverters")
    op.drop_table("panels")
