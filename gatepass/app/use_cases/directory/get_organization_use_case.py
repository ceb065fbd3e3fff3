from gatepass.libs.result import Error, Result, Return
from gatepass.app.services.tenant_directory import TenantDirectory
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.domain.principal import Principal

from .dtos import OrganizationResponse


class GetOrganizationUseCase:
    """Use case for loading the caller's own organization"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal) -> Result[OrganizationResponse]:
        async with self.uow:
            organization = await TenantDirectory(self.uow).get_organization(
                principal.organization_id
            )
            if organization is None:
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organization not found"))

            return Return.ok(OrganizationResponse.from_entity(organization))
