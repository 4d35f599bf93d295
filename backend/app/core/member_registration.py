"""Member Registration Pipeline — uniqueness pre-check, structural validation, write.

Invariants:
    - No IO except through the MemberRepository protocol; no async, no ORM imports
    - Uniqueness failures short-circuit before any write attempt
    - Structural validation runs before the write; first violation wins
    - Integrity violations are classified by field markers in fixed order
      national_id > membership_number > name; duplicates carry the CANDIDATE's value
    - Unrecognized integrity violations become StorageFailure (nothing escapes as a fault)

Design Decisions:
    - Pre-check AND post-write classification: the pre-check gives clean attribution
      in the common case, the classification catches concurrent writers that both
      passed the pre-check
    - STRUCTURAL_RULES built once at import: stateless, shared by every call
"""

from functools import partial
from typing import Callable

from app.core.domain_types import MemberCandidate, MemberField, MemberRecord
from app.core.errors import IntegrityViolation
from app.core.member_errors import (
    EmptyField, MemberError, StorageFailure, duplicate_error,
)
from app.core.outcome import Outcome, failure, success
from app.core.repository_protocols import MemberRepository


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


# Validation order is part of the contract: only the first failing field is reported
STRUCTURAL_RULES: tuple[tuple[MemberField, Callable[[MemberRecord], bool]], ...] = (
    (MemberField.NAME, lambda r: not _is_blank(r.name)),
    (MemberField.NATIONAL_ID, lambda r: not _is_blank(r.national_id)),
    (MemberField.BIRTH_DATE, lambda r: r.birth_date is not None),
    (MemberField.MEMBERSHIP_NUMBER, lambda r: r.membership_number is not None),
)

# Lower-case substrings that identify the violated constraint in a driver message
CONSTRAINT_MARKERS: tuple[tuple[MemberField, tuple[str, ...]], ...] = (
    (MemberField.NATIONAL_ID, ("national_id", "uq_members_national_id")),
    (MemberField.MEMBERSHIP_NUMBER, (
        "membership_number", "uq_members_membership_number",
    )),
    (MemberField.NAME, ("name", "uq_members_name")),
)


# ─── Mapping ─────────────────────────────────────────────────────

def to_record(candidate: MemberCandidate) -> MemberRecord:
    """Transport -> storage. No identity yet."""
    return MemberRecord(
        name=candidate.name,
        national_id=candidate.national_id,
        membership_number=candidate.membership_number,
        birth_date=candidate.birth_date,
    )


def to_candidate(record: MemberRecord) -> MemberCandidate:
    """Storage -> transport. Drops the identity."""
    return MemberCandidate(
        name=record.name,
        national_id=record.national_id,
        membership_number=record.membership_number,
        birth_date=record.birth_date,
    )


# ─── Pure checks ─────────────────────────────────────────────────

def first_structural_violation(record: MemberRecord) -> MemberField | None:
    """Return the first field that breaks a structural rule, or None."""
    for member_field, is_valid in STRUCTURAL_RULES:
        if not is_valid(record):
            return member_field
    return None


def classify_integrity_violation(description: str) -> MemberField | None:
    """Match a constraint-failure message against the field markers."""
    message = description.lower()
    for member_field, markers in CONSTRAINT_MARKERS:
        if any(marker in message for marker in markers):
            return member_field
    return None


# ─── Pipeline steps ──────────────────────────────────────────────

def check_uniqueness(
    repository: MemberRepository, candidate: MemberCandidate,
) -> Outcome[MemberCandidate, MemberError]:
    """One read: Success(candidate) if no stored member shares a unique field."""
    conflicting = repository.find_first_conflicting_field(
        candidate.national_id, candidate.membership_number, candidate.name,
    )
    if conflicting is None:
        return success(candidate)
    return failure(duplicate_error(MemberField(conflicting), candidate))


def persist(
    repository: MemberRepository, candidate: MemberCandidate,
) -> Outcome[MemberRecord, MemberError]:
    """Validate the storage record, write it, translate constraint failures."""
    record = to_record(candidate)

    violation = first_structural_violation(record)
    if violation is not None:
        return failure(EmptyField(violation))

    try:
        return success(repository.save(record))
    except IntegrityViolation as e:
        member_field = classify_integrity_violation(e.description)
        if member_field is None:
            return failure(StorageFailure(e.description))
        return failure(duplicate_error(member_field, candidate))


def create_member(
    repository: MemberRepository, candidate: MemberCandidate,
) -> Outcome[MemberCandidate, MemberError]:
    """Pre-check -> persist -> back to transport shape."""
    return (
        check_uniqueness(repository, candidate)
        .flat_map(partial(persist, repository))
        .map(to_candidate)
    )
