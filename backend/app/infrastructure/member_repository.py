"""SQLAlchemy Member Repository — MemberRepository implementation over a sync ORM session.

Invariants:
    - Conflict lookup is ONE query; CASE order encodes national_id > membership_number > name
    - save() flushes (never commits): the registration service owns the transaction
    - IntegrityError is rolled back and re-raised as core IntegrityViolation
      carrying the driver message; other SQLAlchemy errors propagate unchanged

Design Decisions:
    - Sync Session, not AsyncSession: instances are built inside AsyncSession.run_sync,
      where the greenlet bridge makes blocking-style calls safe
    - ORM <-> MemberRecord mapping kept here so core never sees the Member model
"""

import logging

from sqlalchemy import case, literal, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.domain_types import (
    MemberField, MemberId, MemberRecord, UNIQUE_FIELDS,
)
from app.core.errors import IntegrityViolation
from app.models.member import Member

logger = logging.getLogger(__name__)


def _exists(column, value):
    return select(Member.id).where(column == value).exists()


class SqlAlchemyMemberRepository:
    """Member persistence backed by the members table."""

    def __init__(self, session: Session):
        self.session = session

    def find_first_conflicting_field(
        self,
        national_id: str | None,
        membership_number: int | None,
        name: str | None,
    ) -> MemberField | None:
        values = {
            MemberField.NATIONAL_ID: (Member.national_id, national_id),
            MemberField.MEMBERSHIP_NUMBER: (
                Member.membership_number, membership_number,
            ),
            MemberField.NAME: (Member.name, name),
        }
        conflict = case(
            *[
                (_exists(*values[f]), literal(f.value))
                for f in UNIQUE_FIELDS
            ],
            else_=None,
        )
        found = self.session.execute(select(conflict)).scalar()
        return MemberField(found) if found is not None else None

    def save(self, record: MemberRecord) -> MemberRecord:
        member = Member(
            name=record.name,
            national_id=record.national_id,
            membership_number=record.membership_number,
            birth_date=record.birth_date,
        )
        self.session.add(member)
        try:
            self.session.flush()
        except IntegrityError as e:
            self.session.rollback()
            description = str(e.orig) if e.orig is not None else str(e)
            logger.warning(f"Member insert rejected: {description}")
            raise IntegrityViolation(description) from e
        return MemberRecord(
            name=member.name,
            national_id=member.national_id,
            membership_number=member.membership_number,
            birth_date=member.birth_date,
            id=MemberId(member.id),
        )
