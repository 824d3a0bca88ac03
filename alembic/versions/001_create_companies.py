"""Create companies table.

Revision ID: 001_companies
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_companies"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "companies",
        sa.Column("company_code", sa.String(50), primary_key=True),
        sa.Column("site_id", sa.String(50), nullable=True),
        sa.Column("company_name", sa.String(200), nullable=True),
        sa.Column("address_line1", sa.String(200), nullable=True),
        sa.Column("address_line2", sa.String(200), nullable=True),
        sa.Column("address_line3", sa.String(200), nullable=True),
        sa.Column("postal_zip_code", sa.String(20), nullable=True),
        sa.Column("country", sa.String(100), nullable=True),
        sa.Column("equipment_company_code", sa.String(50), nullable=True),
        sa.Column("phone_number", sa.String(50), nullable=True),
        sa.Column("fax_number", sa.String(50), nullable=True),
        sa.Column("last_modified", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_companies_site_id", "companies", ["site_id"])


def downgrade() -> None:
    op.drop_index("ix_companies_site_id", table_name="companies")
    op.drop_table("companies")
