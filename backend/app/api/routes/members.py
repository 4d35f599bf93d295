"""Member Routes — member creation and the thread diagnostic endpoint.

Invariants:
    - The route is the ONLY place MemberError becomes an HTTP status/message
    - DuplicateField -> 409, EmptyField -> 400, StorageFailure -> 500
    - Error dispatch is exhaustive: an unknown variant fails loudly (assert_never)
    - StorageFailure details are logged, never returned to the client

Design Decisions:
    - Outcome.fold builds the response: exactly one branch runs per request
    - `match` on dataclass variants over isinstance chains: mirrors the closed union
"""

import asyncio
import logging
import threading
from typing import assert_never

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import MemberCandidate
from app.core.member_errors import (
    EmptyField,
    MemberError,
    MembershipNumberAlreadyExists,
    NameAlreadyExists,
    NationalIdAlreadyExists,
    StorageFailure,
)
from app.infrastructure.database import get_db
from app.schemas.member import (
    MemberCreate, MemberOperationResponse, ThreadInfoResponse,
)
from app.services.member_registration import MemberRegistrationService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/members", tags=["members"])


def error_status(error: MemberError) -> int:
    match error:
        case NationalIdAlreadyExists() | MembershipNumberAlreadyExists() | NameAlreadyExists():
            return status.HTTP_409_CONFLICT
        case EmptyField():
            return status.HTTP_400_BAD_REQUEST
        case StorageFailure():
            return status.HTTP_500_INTERNAL_SERVER_ERROR
        case _:
            assert_never(error)


def error_message(error: MemberError) -> str:
    match error:
        case NationalIdAlreadyExists(national_id=national_id):
            return f"A member with national ID {national_id} already exists"
        case MembershipNumberAlreadyExists(membership_number=number):
            return f"A member with membership number {number} already exists"
        case NameAlreadyExists(name=name):
            return f"A member named {name} already exists"
        case EmptyField(field=member_field):
            return (
                "Cannot create member: mandatory field "
                f"'{member_field.value}' is empty"
            )
        case StorageFailure():
            return "Critical database error"
        case _:
            assert_never(error)


def _created_response(member: MemberCandidate) -> JSONResponse:
    body = MemberOperationResponse(
        status=status.HTTP_201_CREATED,
        message=f"Member created: {member.national_id}",
    )
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=body.model_dump(exclude_none=True),
    )


def _error_response(error: MemberError) -> JSONResponse:
    status_code = error_status(error)
    if isinstance(error, StorageFailure):
        logger.error(
            f"Unclassified storage failure: {error.details}",
            extra={"error_code": error.code},
        )
    body = MemberOperationResponse(
        status=status_code, message=error_message(error), code=error.code,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


@router.post(
    "", response_model=MemberOperationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": MemberOperationResponse},
        409: {"model": MemberOperationResponse},
        500: {"model": MemberOperationResponse},
    },
)
async def create_member(
    body: MemberCreate, db: AsyncSession = Depends(get_db),
):
    """Register a new member."""
    service = MemberRegistrationService(db)
    outcome = await service.create_member(body.to_candidate())
    return outcome.fold(_created_response, _error_response)


@router.get("/thread", response_model=ThreadInfoResponse)
async def thread_info():
    """Diagnostic: which thread and asyncio task serve this request."""
    current = threading.current_thread()
    task = asyncio.current_task()
    return ThreadInfoResponse(
        thread_name=current.name,
        thread_id=current.ident,
        is_main_thread=current is threading.main_thread(),
        task_name=task.get_name() if task else None,
    )
