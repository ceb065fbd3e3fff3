"""
List Host Guests Use Case
"""

from gatepass.libs.result import Result, Return
from gatepass.app.services.tenant_directory import TenantDirectory
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.domain.principal import Principal

from .dtos import GuestListResponse, GuestResponse
from .host_access import resolve_host


class ListHostGuestsUseCase:
    """Use case for listing the guests registered under one host member"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal, host_member_id: str) -> Result[GuestListResponse]:
        async with self.uow:
            host, error = await resolve_host(TenantDirectory(self.uow), principal, host_member_id)
            if error:
                return Return.err(error)

            guests = await self.uow.guests.list_by_host(host.organization_id, host.id)
            return Return.ok(
                GuestListResponse(guests=[GuestResponse.from_entity(g) for g in guests])
            )
