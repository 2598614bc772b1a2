"""Create user_table and energy_reports.

Revision ID: 20250301000000
Revises:
Create Date: 2025-03-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20250301000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "user_table",
        sa.Column("user_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_name", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False, server_default="user"),
        sa.PrimaryKeyConstraint("user_id"),
    )
    op.create_index(op.f("ix_user_table_user_name"), "user_table", ["user_name"])

    op.create_table(
        "energy_reports",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("meter_no", sa.Integer(), nullable=True),
        sa.Column("machine_name", sa.String(length=255), nullable=True),
        sa.Column("reading_date", sa.DateTime(), nullable=False),
        sa.Column("kwh", sa.Numeric(14, 3), nullable=True),
        sa.Column("kvah", sa.Numeric(14, 3), nullable=True),
        sa.Column("kw", sa.Numeric(12, 3), nullable=True),
        sa.Column("voltage", sa.Numeric(10, 2), nullable=True),
        sa.Column("current", sa.Numeric(10, 2), nullable=True),
        sa.Column("power_factor", sa.Numeric(5, 3), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_energy_reports_meter_no"), "energy_reports", ["meter_no"])
    op.create_index(op.f("ix_energy_reports_reading_date"), "energy_reports", ["reading_date"])


def downgrade() -> None:
    op.drop_index(op.f("ix_energy_reports_reading_date"), table_name="energy_reports")
    op.drop_index(op.f("ix_energy_reports_meter_no"), table_name="energy_reports")
    op.drop_table("energy_reports")
    op.drop_index(op.f("ix_user_table_user_name"), table_name="user_table")
    op.drop_table("user_table")
