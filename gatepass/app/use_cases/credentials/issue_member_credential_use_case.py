"""
Issue Member Credential Use Case

Derives the member's stable credential hash, slides its expiry forward and
stores both on the member record.
"""

import logging
from typing import Callable, Optional
from datetime import datetime

from gatepass.libs.result import Error, Result, Return
from gatepass.app.services.tenant_directory import TenantDirectory
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.domain.base import utc_now
from gatepass.domain.credentials import (
    MANUAL_CODE_MAX_ATTEMPTS,
    derive_manual_code,
    derive_member_credential_hash,
)
from gatepass.domain.entities import Member, PrincipalRole
from gatepass.domain.principal import Principal

from .dtos import CredentialResponse

logger = logging.getLogger(__name__)


class IssueMemberCredentialUseCase:
    """
    Use case for issuing (or re-issuing) a member's gate credential.

    Business Rules:
    - hash = HMAC(organization_id, member_id, email); no timestamp, so re-issuing is idempotent
    - expiry = now + organization credential TTL (24h default), reset on every call
    - Members may only issue their own credential; guards/admins any member of their organization
    - Member outside the caller's organization -> UNAUTHORIZED, unknown member -> OWNER_NOT_FOUND
    - manual_code is unique per organization: a code held by another member is re-derived
      with the next attempt counter, so re-issuing lands on the same free code
    - Exactly one member write, nothing persisted on error, no access log entry
    """

    def __init__(
        self,
        uow: UnitOfWork,
        secret: str,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.secret = secret
        self.clock = clock

    async def execute(self, principal: Principal, member_id: str) -> Result[CredentialResponse]:
        """
        Execute issue member credential use case.

        Args:
            principal: Authenticated caller (tenant binding comes from here)
            member_id: Member whose credential is issued

        Returns:
            Result with CredentialResponse DTO, or Error
        """
        async with self.uow:
            directory = TenantDirectory(self.uow)

            member = await directory.find_member(principal.organization_id, member_id)
            if member is None:
                if await directory.locate_member(member_id) is not None:
                    logger.warning(
                        "Credential issuance across organizations refused: caller_org=%s member=%s",
                        principal.organization_id,
                        member_id,
                    )
                    return Return.err(
                        Error("UNAUTHORIZED", "Member does not belong to your organization")
                    )
                return Return.err(Error("OWNER_NOT_FOUND", "Member not found"))

            if principal.role == PrincipalRole.member and principal.id != member.id:
                return Return.err(
                    Error("UNAUTHORIZED", "Members can only issue their own credential")
                )

            ttl = await directory.credential_ttl(member.organization_id)

            manual_code = await self._free_manual_code(member)
            if manual_code is None:
                logger.error(
                    "No free manual code: organization=%s member=%s",
                    member.organization_id,
                    member.id,
                )
                return Return.err(
                    Error("MANUAL_CODE_UNAVAILABLE", "Could not allocate a manual access code")
                )

            member.credential_hash = derive_member_credential_hash(
                self.secret, member.organization_id, member.id, member.email
            )
            member.credential_expiry = self.clock() + ttl
            member.manual_code = manual_code

            await self.uow.members.update(member)
            await self.uow.commit()

            logger.info(
                "Credential issued: organization=%s member=%s expiry=%s",
                member.organization_id,
                member.id,
                member.credential_expiry.isoformat(),
            )

            return Return.ok(
                CredentialResponse(
                    member_id=member.id,
                    hash=member.credential_hash,
                    expiry=member.credential_expiry,
                    manual_code=member.manual_code,
                )
            )

    async def _free_manual_code(self, member: Member) -> Optional[str]:
        for attempt in range(MANUAL_CODE_MAX_ATTEMPTS):
            code = derive_manual_code(self.secret, member.organization_id, member.id, attempt)
            holder = await self.uow.members.get_by_manual_code(member.organization_id, code)
            if holder is None or holder.id == member.id:
                return code
        return None
