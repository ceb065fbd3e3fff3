"""
Guest API Routes

Members register visitors and issue them time-boxed credentials.
Guards and admins may act on behalf of any host in their organization.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from gatepass.api.error import raise_for_error
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.app.use_cases.guests import (
    DeactivateGuestCredentialUseCase,
    GuestCredentialListResponse,
    GuestCredentialResponse,
    GuestListResponse,
    GuestResponse,
    IssueGuestCredentialUseCase,
    ListActiveGuestCredentialsUseCase,
    ListHostGuestsUseCase,
    RegisterGuestUseCase,
)
from gatepass.depends import get_current_principal, get_unit_of_work
from gatepass.domain.principal import Principal

router = APIRouter(prefix="/guests", tags=["Guests"])


class RegisterGuestRequest(BaseModel):
    """POST /guests request payload"""

    host_member_id: str
    name: str = Field(max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    email: Optional[str] = Field(default=None, max_length=255)
    relationship: Optional[str] = Field(default=None, max_length=100)


class IssueGuestCredentialRequest(BaseModel):
    """POST /guests/{guest_id}/credentials request payload"""

    host_member_id: str
    start_at: datetime
    end_at: datetime
    purpose: str = Field(default="", max_length=255)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=GuestResponse)
async def register_guest(
    request: RegisterGuestRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Register a guest under a host member.

    Raises:
        - 400 Bad Request: INVALID_GUEST
        - 403 Forbidden: UNAUTHORIZED
        - 404 Not Found: OWNER_NOT_FOUND
    """
    result = await RegisterGuestUseCase(uow).execute(
        principal,
        host_member_id=request.host_member_id,
        name=request.name,
        phone=request.phone,
        email=request.email,
        relationship=request.relationship,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=GuestListResponse)
async def list_guests(
    host_member_id: str = Query(..., description="Host member whose guests to list"),
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List the guests registered by a host."""
    result = await ListHostGuestsUseCase(uow).execute(principal, host_member_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{guest_id}/credentials",
    status_code=status.HTTP_201_CREATED,
    response_model=GuestCredentialResponse,
)
async def issue_guest_credential(
    guest_id: str,
    request: IssueGuestCredentialRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Issue a guest credential valid from start_at through end_at.

    Timezone-aware datetimes are normalized to UTC.

    Raises:
        - 400 Bad Request: INVALID_WINDOW (start_at after end_at)
        - 403 Forbidden: UNAUTHORIZED
        - 404 Not Found: OWNER_NOT_FOUND, GUEST_NOT_FOUND
    """
    result = await IssueGuestCredentialUseCase(uow).execute(
        principal,
        host_member_id=request.host_member_id,
        guest_id=guest_id,
        start_at=request.start_at,
        end_at=request.end_at,
        purpose=request.purpose,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/{guest_id}/credentials",
    status_code=status.HTTP_200_OK,
    response_model=GuestCredentialListResponse,
)
async def list_active_guest_credentials(
    guest_id: str,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List a guest's credentials that are active and not yet past end_at."""
    result = await ListActiveGuestCredentialsUseCase(uow).execute(principal, guest_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/credentials/{credential_id}/deactivate",
    status_code=status.HTTP_200_OK,
    response_model=GuestCredentialResponse,
)
async def deactivate_guest_credential(
    credential_id: str,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Revoke a guest credential. Deactivating twice is not an error.

    Raises:
        - 403 Forbidden: UNAUTHORIZED
        - 404 Not Found: CREDENTIAL_NOT_FOUND
    """
    result = await DeactivateGuestCredentialUseCase(uow).execute(principal, credential_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
