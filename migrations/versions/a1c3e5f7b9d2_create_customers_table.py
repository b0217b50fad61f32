"""create Customers table

Revision ID: a1c3e5f7b9d2
Revises:
Create Date: 2026-10-18

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = "a1c3e5f7b9d2"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    existing_tables = set(inspect(bind).get_table_names())

    # scripts/init_db.py may have created it already.
    if "Customers" not in existing_tables:
        op.create_table(
            "Customers",
            sa.Column("CustomerId", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
            sa.Column("CompanyName", sa.Text(), nullable=True),
            sa.Column("ContactName", sa.Text(), nullable=True),
        )


def downgrade() -> None:
    op.drop_table("Customers")
