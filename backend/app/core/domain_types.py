"""Domain Types — member records and the uniquely-constrained field names.

Invariants:
    - MemberCandidate never carries an identity (constructed per request)
    - MemberRecord.id is None until the store assigns it on the first write
    - MemberField values match the column names of the members table
    - UNIQUE_FIELDS order is the conflict priority: national_id > membership_number > name

Design Decisions:
    - NewType for MemberId: zero runtime cost, full type-checker support
    - str Enum for MemberField: serializes to JSON and compares to raw column names
    - Candidate fields are Optional: blank/null input must reach structural
      validation instead of failing at the wire (ADR: EmptyField is a domain error)
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

MemberId = NewType("MemberId", int)


# ─── Enums ───────────────────────────────────────────────────────

class MemberField(str, Enum):
    """Member attributes referenced by validation and conflict errors."""
    NAME = "name"
    NATIONAL_ID = "national_id"
    MEMBERSHIP_NUMBER = "membership_number"
    BIRTH_DATE = "birth_date"


# Conflict priority: first match wins when several fields clash
UNIQUE_FIELDS: tuple[MemberField, ...] = (
    MemberField.NATIONAL_ID,
    MemberField.MEMBERSHIP_NUMBER,
    MemberField.NAME,
)


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class MemberCandidate:
    """Transport record — what the client submits and what we echo back."""
    name: str | None
    national_id: str | None
    membership_number: int | None
    birth_date: date | None


@dataclass(frozen=True)
class MemberRecord:
    """Storage record — candidate fields plus the store-assigned identity."""
    name: str | None
    national_id: str | None
    membership_number: int | None
    birth_date: date | None
    id: MemberId | None = None
