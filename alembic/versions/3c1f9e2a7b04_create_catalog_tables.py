"""Create catalog tables

Revision ID: 3c1f9e2a7b04
Revises:
Create Date: 2026-10-18 10:02:11.417530

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3c1f9e2a7b04"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> sa.Column:
    return sa.Column(
        "updated_at",
        sa.DateTime(timezone=True),
        server_default=sa.text("now()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "devices",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("brand", sa.String(length=30), nullable=False),
        sa.Column("model", sa.String(length=100), nullable=False),
        sa.Column("storage_gb", sa.Integer(), nullable=False),
        sa.Column("list_price", sa.Integer(), nullable=False),
        sa.Column("exposed", sa.Boolean(), nullable=False),
        _timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "device_colors",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("device_id", sa.String(length=64), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("code", sa.String(length=30), nullable=False),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("hex", sa.String(length=7), nullable=False),
        sa.ForeignKeyConstraint(["device_id"], ["devices.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "plans",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("category_id", sa.String(length=30), nullable=False),
        sa.Column("category_name", sa.String(length=50), nullable=False),
        sa.Column("base_price", sa.Integer(), nullable=False),
        sa.Column("data", sa.String(length=50), nullable=False),
        sa.Column("voice", sa.String(length=50), nullable=False),
        sa.Column("sms", sa.String(length=50), nullable=False),
        sa.Column("benefits", sa.JSON(), nullable=False),
        sa.Column("exposed", sa.Boolean(), nullable=False),
        _timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "subsidies",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("join_type", sa.String(length=10), nullable=False),
        sa.Column("device_id", sa.String(length=64), nullable=False),
        sa.Column("plan_id", sa.String(length=64), nullable=False),
        sa.Column("common_subsidy", sa.Integer(), nullable=False),
        sa.Column("additional_subsidy", sa.Integer(), nullable=False),
        sa.Column("select_subsidy", sa.Integer(), nullable=False),
        sa.Column("exposed", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(["device_id"], ["devices.id"]),
        sa.ForeignKeyConstraint(["plan_id"], ["plans.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("join_type", "device_id", "plan_id", name="uq_subsidies_combination"),
    )
    op.create_table(
        "pricing_settings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("annual_interest_rate", sa.Numeric(precision=6, scale=5), nullable=False),
        sa.Column("rounding_unit", sa.Integer(), nullable=False),
        sa.Column("rounding_policy", sa.String(length=20), nullable=False),
        sa.Column("selective_discount_rate", sa.Numeric(precision=5, scale=4), nullable=False),
        sa.Column("bundle_rate_none", sa.Numeric(precision=5, scale=4), nullable=False),
        sa.Column("bundle_rate_internet", sa.Numeric(precision=5, scale=4), nullable=False),
        sa.Column("bundle_rate_internet_tv", sa.Numeric(precision=5, scale=4), nullable=False),
        sa.Column("bundle_discount_base", sa.String(length=30), nullable=False),
        sa.Column("installment_months", sa.JSON(), nullable=False),
        sa.Column("contract_term_months", sa.Integer(), nullable=False),
        _timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("pricing_settings")
    op.drop_table("subsidies")
    op.drop_table("plans")
    op.drop_table("device_colors")
    op.drop_table("devices")
