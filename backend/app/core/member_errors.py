"""Member Errors — closed set of business failures returned as values, never raised.

Invariants:
    - MemberError is a closed union: adding a variant means updating every `match`
    - Every variant is frozen and carries the offending field/value
    - code is stable and safe to expose to clients

Design Decisions:
    - Values over exceptions: errors travel on the Outcome failure track and only
      the API route turns them into HTTP responses (ADR: railway-oriented pipeline)
    - One variant per duplicated field: the client gets the typed value back
      (membership_number stays an int)
"""

from dataclasses import dataclass
from typing import Union

from app.core.domain_types import MemberCandidate, MemberField


@dataclass(frozen=True)
class NationalIdAlreadyExists:
    national_id: str
    field = MemberField.NATIONAL_ID
    code = "NATIONAL_ID_ALREADY_EXISTS"


@dataclass(frozen=True)
class MembershipNumberAlreadyExists:
    membership_number: int
    field = MemberField.MEMBERSHIP_NUMBER
    code = "MEMBERSHIP_NUMBER_ALREADY_EXISTS"


@dataclass(frozen=True)
class NameAlreadyExists:
    name: str
    field = MemberField.NAME
    code = "NAME_ALREADY_EXISTS"


@dataclass(frozen=True)
class EmptyField:
    """A mandatory field was null or blank when the record was about to be written."""
    field: MemberField
    code = "EMPTY_FIELD"


@dataclass(frozen=True)
class StorageFailure:
    """The store rejected the write for a reason we cannot attribute to a field."""
    details: str
    code = "STORAGE_FAILURE"


DuplicateField = Union[
    NationalIdAlreadyExists, MembershipNumberAlreadyExists, NameAlreadyExists,
]

MemberError = Union[
    NationalIdAlreadyExists,
    MembershipNumberAlreadyExists,
    NameAlreadyExists,
    EmptyField,
    StorageFailure,
]


def duplicate_error(
    field: MemberField, candidate: MemberCandidate,
) -> DuplicateField:
    """Build the duplicate error for `field`, carrying the candidate's own value."""
    if field == MemberField.NATIONAL_ID:
        return NationalIdAlreadyExists(candidate.national_id)
    if field == MemberField.MEMBERSHIP_NUMBER:
        return MembershipNumberAlreadyExists(candidate.membership_number)
    if field == MemberField.NAME:
        return NameAlreadyExists(candidate.name)
    raise ValueError(f"{field.value} is not a uniquely-constrained field")
