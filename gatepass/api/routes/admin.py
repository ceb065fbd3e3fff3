"""
Admin API Routes - Registration Endpoints

These endpoints stand in for the external registration system that owns
organizations and members. Authentication is via Admin API Key, not user JWTs.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from gatepass.api.error import ClientError, ServerError
from gatepass.api.utils.admin_auth import verify_admin_api_key
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.app.use_cases.admin import (
    CreateOrganizationResponse,
    CreateOrganizationUseCase,
    RegisterMemberResponse,
    RegisterMemberUseCase,
    SetMemberActiveResponse,
    SetMemberActiveUseCase,
)
from gatepass.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


class CreateOrganizationRequest(BaseModel):
    id: Optional[str] = Field(default=None, max_length=64)
    name: str = Field(max_length=255)
    community_type: str = "house_based"
    credential_ttl_hours: int = 24


class RegisterMemberRequest(BaseModel):
    id: Optional[str] = Field(default=None, max_length=64)
    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    access_level: str = "resident"
    home_address: Optional[str] = Field(default=None, max_length=255)
    vehicle_info: Optional[str] = Field(default=None, max_length=255)


@router.post(
    "/organizations",
    status_code=status.HTTP_201_CREATED,
    response_model=CreateOrganizationResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def create_organization(
    request: CreateOrganizationRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Organization

    Requires: X-Admin-API-Key header

    Raises:
        - 400 Bad Request: INVALID_COMMUNITY_TYPE, INVALID_TTL
        - 401 Unauthorized: Missing or invalid admin API key
        - 409 Conflict: ORGANIZATION_EXISTS
    """
    use_case = CreateOrganizationUseCase(uow)
    result = await use_case.execute(
        name=request.name,
        community_type=request.community_type,
        credential_ttl_hours=request.credential_ttl_hours,
        organization_id=request.id,
    )

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_COMMUNITY_TYPE", "INVALID_TTL"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        if error.code == "ORGANIZATION_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.post(
    "/organizations/{organization_id}/members",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterMemberResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def register_member(
    organization_id: str,
    request: RegisterMemberRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Register Member

    Requires: X-Admin-API-Key header

    Raises:
        - 400 Bad Request: INVALID_ACCESS_LEVEL
        - 401 Unauthorized: Missing or invalid admin API key
        - 404 Not Found: ORGANIZATION_NOT_FOUND
        - 409 Conflict: MEMBER_EXISTS
    """
    use_case = RegisterMemberUseCase(uow)
    result = await use_case.execute(
        organization_id=organization_id,
        name=request.name,
        email=request.email,
        access_level=request.access_level,
        home_address=request.home_address,
        vehicle_info=request.vehicle_info,
        member_id=request.id,
    )

    if result.is_err():
        error = result.error
        if error.code == "INVALID_ACCESS_LEVEL":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        if error.code == "ORGANIZATION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        if error.code == "MEMBER_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


async def _set_member_active(member_id: str, is_active: bool, uow: UnitOfWork):
    result = await SetMemberActiveUseCase(uow).execute(member_id, is_active)

    if result.is_err():
        error = result.error
        if error.code == "MEMBER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.post(
    "/members/{member_id}/deactivate",
    status_code=status.HTTP_200_OK,
    response_model=SetMemberActiveResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def deactivate_member(member_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Deactivate Member

    Every later validation of this member's credential is denied INACTIVE.
    """
    return await _set_member_active(member_id, False, uow)


@router.post(
    "/members/{member_id}/reactivate",
    status_code=status.HTTP_200_OK,
    response_model=SetMemberActiveResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def reactivate_member(member_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """Reactivate Member"""
    return await _set_member_active(member_id, True, uow)
