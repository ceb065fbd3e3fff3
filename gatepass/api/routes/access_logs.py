"""
Access Log API Routes

Read access to the gate audit trail of the caller's organization.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from gatepass.api.error import raise_for_error
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.app.use_cases.access_logs import (
    AccessLogsResponse,
    GetAccessLogsUseCase,
    GetMemberAccessHistoryUseCase,
    MemberAccessHistoryResponse,
)
from gatepass.depends import get_current_principal, get_unit_of_work
from gatepass.domain.entities import SubjectType
from gatepass.domain.principal import Principal

router = APIRouter(prefix="/access-logs", tags=["Access Logs"])


@router.get("", status_code=status.HTTP_200_OK, response_model=AccessLogsResponse)
async def get_access_logs(
    limit: int = Query(50, ge=1, le=100, description="Number of entries per page"),
    cursor: Optional[str] = Query(None, description="Cursor for pagination"),
    subject_type: Optional[SubjectType] = Query(None, description="Filter by member or guest"),
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get access log entries for the organization, newest first.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: INSUFFICIENT_ROLE (caller is not a guard or admin)
    """
    result = await GetAccessLogsUseCase(uow).execute(
        principal, limit=limit, cursor=cursor, subject_type=subject_type
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/members/{member_id}",
    status_code=status.HTTP_200_OK,
    response_model=MemberAccessHistoryResponse,
)
async def get_member_access_history(
    member_id: str,
    limit: int = Query(50, ge=1, le=100),
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get a member's granted entries, newest first.

    Members can only read their own history.

    Raises:
        - 403 Forbidden: UNAUTHORIZED
        - 404 Not Found: MEMBER_NOT_FOUND
    """
    result = await GetMemberAccessHistoryUseCase(uow).execute(principal, member_id, limit=limit)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
