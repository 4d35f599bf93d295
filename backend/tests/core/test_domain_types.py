"""Domain Types — verifies member record types and field enums.

Tests:
    - MemberField values match the members table columns
    - UNIQUE_FIELDS encodes the conflict priority
    - records are immutable; storage record starts without identity
"""

import dataclasses
from datetime import date

import pytest

from app.core.domain_types import (
    MemberCandidate, MemberField, MemberId, MemberRecord, UNIQUE_FIELDS,
)
from app.models.member import Member


def test_member_field_values_are_column_names():
    columns = set(Member.__table__.columns.keys())
    assert {f.value for f in MemberField} <= columns


def test_unique_fields_priority_order():
    assert UNIQUE_FIELDS == (
        MemberField.NATIONAL_ID,
        MemberField.MEMBERSHIP_NUMBER,
        MemberField.NAME,
    )


def test_birth_date_is_not_unique():
    assert MemberField.BIRTH_DATE not in UNIQUE_FIELDS


def test_member_id_wraps_int():
    assert MemberId(7) == 7


def test_record_has_no_identity_until_stored():
    record = MemberRecord(
        name="Ana", national_id="123", membership_number=1,
        birth_date=date(1990, 1, 1),
    )
    assert record.id is None


def test_candidate_is_frozen():
    candidate = MemberCandidate(
        name="Ana", national_id="123", membership_number=1,
        birth_date=date(1990, 1, 1),
    )
    with pytest.raises(dataclasses.FrozenInstanceError):
        candidate.name = "Bea"


def test_member_field_serializes_to_string():
    assert MemberField.NATIONAL_ID.value == "national_id"
    assert MemberField.NATIONAL_ID == "national_id"
