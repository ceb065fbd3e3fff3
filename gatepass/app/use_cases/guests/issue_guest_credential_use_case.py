"""
Issue Guest Credential Use Case

Creates a time-boxed visitor pass for a guest.
"""

import logging
from datetime import datetime

from gatepass.libs.result import Error, Result, Return
from gatepass.app.services.tenant_directory import TenantDirectory
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.domain.base import to_naive_utc
from gatepass.domain.credentials import new_guest_credential_hash
from gatepass.domain.entities import GuestCredential
from gatepass.domain.principal import Principal

from .dtos import GuestCredentialResponse
from .host_access import resolve_host

logger = logging.getLogger(__name__)


class IssueGuestCredentialUseCase:
    """
    Use case for issuing a visitor pass.

    Business Rules:
    - start_at <= end_at, otherwise INVALID_WINDOW (checked before any lookup)
    - Host must resolve in the caller's organization (OWNER_NOT_FOUND / UNAUTHORIZED)
    - Guest must exist and be hosted by that member (GUEST_NOT_FOUND / UNAUTHORIZED)
    - Hash is random per issuance and carries the guest_ prefix
    - Existing passes of the same guest are left untouched
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        host_member_id: str,
        guest_id: str,
        start_at: datetime,
        end_at: datetime,
        purpose: str,
    ) -> Result[GuestCredentialResponse]:
        """
        Execute issue guest credential use case.

        Args:
            principal: Authenticated caller
            host_member_id: Member hosting the guest
            guest_id: Guest receiving the pass
            start_at: First instant the pass is valid (inclusive)
            end_at: Last instant the pass is valid (inclusive)
            purpose: Reason for the visit, shown to the guard

        Returns:
            Result with GuestCredentialResponse DTO, or Error
        """
        start_at = to_naive_utc(start_at)
        end_at = to_naive_utc(end_at)
        if start_at > end_at:
            return Return.err(
                Error("INVALID_WINDOW", "Validity window start must not be after its end")
            )

        async with self.uow:
            host, error = await resolve_host(TenantDirectory(self.uow), principal, host_member_id)
            if error:
                return Return.err(error)

            guest = await self.uow.guests.get_by_id(guest_id)
            if guest is None:
                return Return.err(Error("GUEST_NOT_FOUND", "Guest not found"))

            if guest.organization_id != host.organization_id or guest.host_member_id != host.id:
                return Return.err(
                    Error("UNAUTHORIZED", "Guest is not hosted by this member")
                )

            credential = GuestCredential(
                guest_id=guest.id,
                organization_id=guest.organization_id,
                hash=new_guest_credential_hash(),
                purpose=purpose,
                is_active=True,
                start_at=start_at,
                end_at=end_at,
            )
            await self.uow.guest_credentials.create(credential)
            await self.uow.commit()

            logger.info(
                "Guest credential issued: organization=%s guest=%s window=%s..%s",
                guest.organization_id,
                guest.id,
                start_at.isoformat(),
                end_at.isoformat(),
            )

            return Return.ok(GuestCredentialResponse.from_entity(credential))
