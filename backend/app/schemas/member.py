"""Member Schemas — Pydantic models for the member endpoints.

Invariants:
    - MemberCreate validates TYPES and column bounds (int32, ISO date, text length);
      nulls and blanks pass through so the registration pipeline can report them
      as EmptyField
    - MemberOperationResponse is the single body shape for success and failure

Design Decisions:
    - String fields stripped at the boundary: "  " and "" both reach the core as blank
"""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from app.core.domain_types import MemberCandidate


class MemberCreate(BaseModel):
    """Candidate member as submitted by the client."""
    name: str | None = Field(None, max_length=255)
    national_id: str | None = Field(None, max_length=32)
    membership_number: int | None = Field(None, ge=-2**31, le=2**31 - 1)
    birth_date: date | None = None

    @field_validator("name", "national_id")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else None

    def to_candidate(self) -> MemberCandidate:
        return MemberCandidate(
            name=self.name,
            national_id=self.national_id,
            membership_number=self.membership_number,
            birth_date=self.birth_date,
        )


class MemberOperationResponse(BaseModel):
    """Status echo + human-readable message; code set on failures."""
    status: int
    message: str
    code: str | None = None


class ThreadInfoResponse(BaseModel):
    """Diagnostic snapshot of what is serving the request."""
    thread_name: str
    thread_id: int | None
    is_main_thread: bool
    task_name: str | None
