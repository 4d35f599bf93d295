"""Member Registration Service — pipeline + SQLAlchemy repository on a real (SQLite) DB.

Invariants:
    - Success commits exactly one row with an assigned id
    - Any Failure leaves the table untouched (rollback)
    - Conflict lookup follows national_id > membership_number > name in SQL too
    - A write that slips past the pre-check is classified from the DB message
"""

from datetime import date

import pytest
from sqlalchemy import func, select

from app.core.domain_types import MemberCandidate, MemberField, MemberRecord
from app.core.errors import IntegrityViolation
from app.core.member_errors import (
    EmptyField,
    MembershipNumberAlreadyExists,
    NameAlreadyExists,
    NationalIdAlreadyExists,
)
from app.core.outcome import Failure, Success
from app.infrastructure.member_repository import SqlAlchemyMemberRepository
from app.models.member import Member
from app.services.member_registration import MemberRegistrationService


def _candidate(**overrides) -> MemberCandidate:
    fields = {
        "name": "Bea",
        "national_id": "456",
        "membership_number": 2,
        "birth_date": date(1985, 6, 15),
    }
    fields.update(overrides)
    return MemberCandidate(**fields)


async def _count_members(session_factory) -> int:
    async with session_factory() as session:
        result = await session.execute(select(func.count(Member.id)))
        return result.scalar_one()


# ─── service ─────────────────────────────────────────────────────

async def test_create_member_commits_row_with_identity(
    test_db, test_session_factory,
):
    candidate = _candidate()

    outcome = await MemberRegistrationService(test_db).create_member(candidate)

    assert outcome == Success(candidate)
    async with test_session_factory() as session:
        stored = (await session.execute(select(Member))).scalar_one()
    assert stored.id is not None
    assert (stored.name, stored.national_id, stored.membership_number) == (
        "Bea", "456", 2,
    )
    assert stored.birth_date == date(1985, 6, 15)


async def test_duplicate_national_id_is_rejected_and_nothing_written(
    test_db, test_session_factory, seed_member,
):
    outcome = await MemberRegistrationService(test_db).create_member(
        _candidate(national_id="123", membership_number=1, name="Ana"),
    )

    assert outcome == Failure(NationalIdAlreadyExists("123"))
    assert await _count_members(test_session_factory) == 1


async def test_duplicate_membership_number_beats_name(test_db, seed_member):
    outcome = await MemberRegistrationService(test_db).create_member(
        _candidate(membership_number=1, name="Ana"),
    )

    assert outcome == Failure(MembershipNumberAlreadyExists(1))


async def test_duplicate_name_reported_last(test_db, seed_member):
    outcome = await MemberRegistrationService(test_db).create_member(
        _candidate(name="Ana"),
    )

    assert outcome == Failure(NameAlreadyExists("Ana"))


async def test_blank_national_id_rolls_back(test_db, test_session_factory):
    outcome = await MemberRegistrationService(test_db).create_member(
        _candidate(national_id=""),
    )

    assert outcome == Failure(EmptyField(MemberField.NATIONAL_ID))
    assert await _count_members(test_session_factory) == 0


async def test_concurrent_writer_race_is_classified_from_constraint(
    test_db, test_session_factory, seed_member, monkeypatch,
):
    """Pre-check misses the conflict (as if another request committed in between)."""
    monkeypatch.setattr(
        SqlAlchemyMemberRepository,
        "find_first_conflicting_field",
        lambda self, *args: None,
    )

    outcome = await MemberRegistrationService(test_db).create_member(
        _candidate(national_id="123"),
    )

    assert outcome == Failure(NationalIdAlreadyExists("123"))
    assert await _count_members(test_session_factory) == 1


# ─── repository ──────────────────────────────────────────────────

async def test_repository_reports_no_conflict_on_empty_table(test_db):
    found = await test_db.run_sync(
        lambda s: SqlAlchemyMemberRepository(s).find_first_conflicting_field(
            "123", 1, "Ana",
        ),
    )
    assert found is None


@pytest.mark.parametrize("national_id, number, name, expected", [
    ("123", 1, "Ana", MemberField.NATIONAL_ID),
    ("999", 1, "Ana", MemberField.MEMBERSHIP_NUMBER),
    ("999", 9, "Ana", MemberField.NAME),
    ("999", 9, "Zoe", None),
])
async def test_repository_conflict_priority(
    test_db, seed_member, national_id, number, name, expected,
):
    found = await test_db.run_sync(
        lambda s: SqlAlchemyMemberRepository(s).find_first_conflicting_field(
            national_id, number, name,
        ),
    )
    assert found == expected


async def test_repository_save_assigns_id(test_db):
    record = MemberRecord(
        name="Ana", national_id="123", membership_number=1,
        birth_date=date(1990, 1, 1),
    )

    saved = await test_db.run_sync(
        lambda s: SqlAlchemyMemberRepository(s).save(record),
    )

    assert saved.id is not None
    assert saved.national_id == "123"


async def test_repository_save_translates_integrity_error(test_db, seed_member):
    record = MemberRecord(
        name="Other", national_id="777", membership_number=1,
        birth_date=date(1990, 1, 1),
    )

    with pytest.raises(IntegrityViolation) as excinfo:
        await test_db.run_sync(
            lambda s: SqlAlchemyMemberRepository(s).save(record),
        )

    assert "membership_number" in excinfo.value.description.lower()
