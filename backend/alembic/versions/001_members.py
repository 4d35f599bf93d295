"""Members table with named unique constraints.

Revision ID: 001_members
Revises: None
Create Date: 2026-10-18

Constraint names are matched by the registration pipeline when classifying
integrity violations; rename them only together with CONSTRAINT_MARKERS.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_members"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "members",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("national_id", sa.String(32), nullable=False),
        sa.Column("membership_number", sa.Integer, nullable=False),
        sa.Column("birth_date", sa.Date, nullable=False),
        sa.UniqueConstraint("name", name="uq_members_name"),
        sa.UniqueConstraint("national_id", name="uq_members_national_id"),
        sa.UniqueConstraint(
            "membership_number", name="uq_members_membership_number",
        ),
    )


def downgrade() -> None:
    op.drop_table("members")
