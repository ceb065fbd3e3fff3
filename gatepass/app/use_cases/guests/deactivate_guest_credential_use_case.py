"""
Deactivate Guest Credential Use Case

Turns off one visitor pass. Other passes of the same guest stay valid.
"""

from gatepass.libs.result import Error, Result, Return
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.domain.principal import Principal

from .dtos import GuestCredentialResponse
from .host_access import check_guest_access


class DeactivateGuestCredentialUseCase:
    """
    Use case for deactivating a single guest credential.

    Idempotent: deactivating an inactive pass succeeds without a write.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, credential_id: str
    ) -> Result[GuestCredentialResponse]:
        async with self.uow:
            credential = await self.uow.guest_credentials.get_by_id(credential_id)
            if credential is None or credential.organization_id != principal.organization_id:
                return Return.err(Error("CREDENTIAL_NOT_FOUND", "Guest credential not found"))

            guest = await self.uow.guests.get_by_id(credential.guest_id)
            if guest is None:
                return Return.err(Error("GUEST_NOT_FOUND", "Guest not found"))

            error = check_guest_access(principal, guest)
            if error:
                return Return.err(error)

            if credential.is_active:
                credential.is_active = False
                await self.uow.guest_credentials.update(credential)
                await self.uow.commit()

            return Return.ok(GuestCredentialResponse.from_entity(credential))
