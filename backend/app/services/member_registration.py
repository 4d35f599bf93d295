"""Member Registration Service — runs the pure pipeline inside one DB transaction.

Invariants:
    - One create_member call == one unit of work on the request's AsyncSession
    - Success -> commit; Failure -> rollback (no partial record persists)
    - Never translates MemberError to HTTP: that is the route's job
    - Faults that are not MemberErrors (driver down, etc.) propagate as exceptions

Design Decisions:
    - AsyncSession.run_sync: the core pipeline stays synchronous and composable
      with flat_map/map while still running on the async engine (ADR: core is never async)
    - Repository built per call around the sync session facade: no state kept
      between requests
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from app.core.domain_types import MemberCandidate
from app.core.member_errors import MemberError
from app.core.member_registration import create_member
from app.core.outcome import Outcome
from app.infrastructure.member_repository import SqlAlchemyMemberRepository

logger = logging.getLogger(__name__)


def _run_pipeline(
    session: Session, candidate: MemberCandidate,
) -> Outcome[MemberCandidate, MemberError]:
    return create_member(SqlAlchemyMemberRepository(session), candidate)


class MemberRegistrationService:
    """Transaction owner for member creation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_member(
        self, candidate: MemberCandidate,
    ) -> Outcome[MemberCandidate, MemberError]:
        outcome = await self.db.run_sync(_run_pipeline, candidate)
        if outcome.is_success:
            await self.db.commit()
            logger.info(
                "Member registered",
                extra={"national_id": candidate.national_id, "outcome": "success"},
            )
        else:
            await self.db.rollback()
            logger.info(
                f"Member rejected: {outcome.error}",
                extra={
                    "national_id": candidate.national_id,
                    "outcome": "failure",
                    "error_code": outcome.error.code,
                },
            )
        return outcome
