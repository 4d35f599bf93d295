"""Member ORM — persists a registered member.

Invariants:
    - id is an autoincrement integer assigned on first flush, never reassigned
    - name, national_id, membership_number each carry a NAMED unique constraint
    - every data column is NOT NULL

Design Decisions:
    - Named constraints (uq_members_*): driver messages quote the constraint name,
      which is what the registration pipeline matches on (ADR: stable markers
      across PostgreSQL and SQLite)
"""

from datetime import date

from sqlalchemy import Date, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Member(Base):
    """Registered member."""
    __tablename__ = "members"
    __table_args__ = (
        UniqueConstraint("name", name="uq_members_name"),
        UniqueConstraint("national_id", name="uq_members_national_id"),
        UniqueConstraint(
            "membership_number", name="uq_members_membership_number",
        ),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    national_id: Mapped[str] = mapped_column(String(32), nullable=False)
    membership_number: Mapped[int] = mapped_column(Integer, nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
