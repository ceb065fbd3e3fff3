"""
Organization API Routes

Tenant directory lookups for the authenticated principal's organization.
"""

from fastapi import APIRouter, Depends, Query, status

from gatepass.api.error import raise_for_error
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.app.use_cases.directory import (
    GetOrganizationUseCase,
    ListMembersUseCase,
    MemberListResponse,
    OrganizationResponse,
)
from gatepass.depends import get_current_principal, get_unit_of_work
from gatepass.domain.principal import Principal

router = APIRouter(prefix="/organization", tags=["Organization"])


@router.get("", status_code=status.HTTP_200_OK, response_model=OrganizationResponse)
async def get_organization(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get the caller's organization.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: ORGANIZATION_NOT_FOUND
    """
    result = await GetOrganizationUseCase(uow).execute(principal)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/members", status_code=status.HTTP_200_OK, response_model=MemberListResponse)
async def list_members(
    active_only: bool = Query(False, description="Only return active members"),
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List the organization's member roster.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: INSUFFICIENT_ROLE (members cannot list the roster)
    """
    result = await ListMembersUseCase(uow).execute(principal, active_only=active_only)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
