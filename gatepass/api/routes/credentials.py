"""
Credential API Routes

Member credential issuance and gate validation.
"""

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from gatepass.api.error import ClientError, raise_for_error
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.app.use_cases.credentials import (
    CredentialResponse,
    Decision,
    IssueMemberCredentialUseCase,
    ValidateCredentialUseCase,
)
from gatepass.depends import get_current_principal, get_unit_of_work
from gatepass.domain.principal import Principal
from gatepass.libs.result import Error

router = APIRouter(prefix="/credentials", tags=["Credentials"])


class ValidateCredentialRequest(BaseModel):
    """POST /credentials/validate request payload"""

    credential: str = Field(max_length=512, description="Decoded credential string")


class ValidateManualCodeRequest(BaseModel):
    """POST /credentials/validate-code request payload"""

    code: str = Field(max_length=16, description="Six digit manual access code")


def _require_staff(principal: Principal):
    if not principal.is_staff:
        raise ClientError(
            Error("INSUFFICIENT_ROLE", "Only guards and admins can validate credentials"),
            status_code=status.HTTP_403_FORBIDDEN,
        )


@router.post(
    "/members/{member_id}",
    status_code=status.HTTP_200_OK,
    response_model=CredentialResponse,
)
async def issue_member_credential(
    member_id: str,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Issue (or re-issue) a member credential for display.

    Re-issuing returns the same hash with a fresh expiry.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: UNAUTHORIZED (other organization, or another member's credential)
        - 404 Not Found: OWNER_NOT_FOUND
    """
    use_case = IssueMemberCredentialUseCase(uow, secret=ApplicationConfig.CREDENTIAL_SECRET)
    result = await use_case.execute(principal, member_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/validate", status_code=status.HTTP_200_OK, response_model=Decision)
async def validate_credential(
    request: ValidateCredentialRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Validate a scanned credential.

    Always 200 for a decision: denials carry a reason code
    (NOT_FOUND, CROSS_TENANT_MISMATCH, EXPIRED, NOT_YET_VALID, INACTIVE).
    The guard's organization is taken from the JWT only.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: INSUFFICIENT_ROLE (caller is not a guard or admin)
    """
    _require_staff(principal)
    return await ValidateCredentialUseCase(uow).execute(
        request.credential,
        guard_organization_id=principal.organization_id,
        guard_id=principal.id,
        guard_name=principal.name or principal.id,
    )


@router.post("/validate-code", status_code=status.HTTP_200_OK, response_model=Decision)
async def validate_manual_code(
    request: ValidateManualCodeRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Validate a six digit manual access code typed by the guard.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: INSUFFICIENT_ROLE (caller is not a guard or admin)
    """
    _require_staff(principal)
    return await ValidateCredentialUseCase(uow).validate_manual_code(
        request.code,
        guard_organization_id=principal.organization_id,
        guard_id=principal.id,
        guard_name=principal.name or principal.id,
    )
