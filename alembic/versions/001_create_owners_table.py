"""Create owners table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `owners` table holding PetClinic clients.
How:   Integer identity primary key assigned by the database, plain text
       columns for the form fields, and an index on last_name for the
       prefix search.

Rollback: downgrade() drops the table (destructive: all owners are lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the owners table and its last_name index."""
    op.create_table(
        "owners",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("first_name", sa.String(30), nullable=False),
        sa.Column("last_name", sa.String(30), nullable=False),
        sa.Column("address", sa.String(255), nullable=False),
        sa.Column("city", sa.String(80), nullable=False),
        sa.Column("telephone", sa.String(20), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    # Serves WHERE last_name LIKE 'prefix%'
    op.create_index("idx_owners_last_name", "owners", ["last_name"])


def downgrade() -> None:
    """Drop the owners table entirely."""
    op.drop_index("idx_owners_last_name", table_name="owners")
    op.drop_table("owners")
