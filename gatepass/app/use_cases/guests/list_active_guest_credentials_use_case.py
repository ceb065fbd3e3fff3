"""
List Active Guest Credentials Use Case
"""

from datetime import datetime
from typing import Callable

from gatepass.libs.result import Error, Result, Return
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.domain.base import utc_now
from gatepass.domain.principal import Principal

from .dtos import GuestCredentialListResponse, GuestCredentialResponse
from .host_access import check_guest_access


class ListActiveGuestCredentialsUseCase:
    """
    Use case for listing a guest's usable passes.

    A pass is listed while is_active and its window has not ended, which
    includes passes whose window starts in the future.
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, principal: Principal, guest_id: str
    ) -> Result[GuestCredentialListResponse]:
        async with self.uow:
            guest = await self.uow.guests.get_by_id(guest_id)
            if guest is None or guest.organization_id != principal.organization_id:
                return Return.err(Error("GUEST_NOT_FOUND", "Guest not found"))

            error = check_guest_access(principal, guest)
            if error:
                return Return.err(error)

            credentials = await self.uow.guest_credentials.list_active_for_guest(
                guest.id, self.clock()
            )
            return Return.ok(
                GuestCredentialListResponse(
                    credentials=[GuestCredentialResponse.from_entity(c) for c in credentials]
                )
            )
