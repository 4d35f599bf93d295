"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - The member store is accessed only through MemberRepository
    - save() signals constraint failures with core.errors.IntegrityViolation

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no inheritance
    - Synchronous methods: the registration pipeline is plain functions composed
      with Outcome combinators; the shell runs it inside AsyncSession.run_sync
      so the whole sequence shares one transaction
"""

from typing import Protocol

from app.core.domain_types import MemberField, MemberRecord


class MemberRepository(Protocol):
    """Contract for member persistence — implemented by shell."""

    def find_first_conflicting_field(
        self,
        national_id: str | None,
        membership_number: int | None,
        name: str | None,
    ) -> MemberField | None:
        """First field, in national_id > membership_number > name order, already taken."""
        ...

    def save(self, record: MemberRecord) -> MemberRecord:
        """Persist `record` and return it with its assigned id."""
        ...
