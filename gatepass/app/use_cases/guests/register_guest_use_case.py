"""
Register Guest Use Case
"""

from typing import Optional

from gatepass.libs.result import Error, Result, Return
from gatepass.app.services.tenant_directory import TenantDirectory
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.domain.entities import Guest
from gatepass.domain.principal import Principal

from .dtos import GuestResponse
from .host_access import resolve_host


class RegisterGuestUseCase:
    """
    Use case for registering a visitor under a host member.

    Business Rules:
    - Host must be an active member of the caller's organization
    - The guest inherits the host's organization
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        host_member_id: str,
        name: str,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        relationship: Optional[str] = None,
    ) -> Result[GuestResponse]:
        async with self.uow:
            if not name or not name.strip():
                return Return.err(Error("INVALID_GUEST", "Guest name is required"))

            host, error = await resolve_host(TenantDirectory(self.uow), principal, host_member_id)
            if error:
                return Return.err(error)

            guest = Guest(
                organization_id=host.organization_id,
                host_member_id=host.id,
                name=name.strip(),
                phone=phone,
                email=email,
                relationship=relationship,
            )
            await self.uow.guests.create(guest)
            await self.uow.commit()

            return Return.ok(GuestResponse.from_entity(guest))
