from gatepass.libs.result import Error, Result, Return
from gatepass.app.services.tenant_directory import TenantDirectory
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.domain.principal import Principal

from .dtos import MemberListResponse, MemberResponse


class ListMembersUseCase:
    """
    Use case for reading an organization's member roster.

    Business Rules:
    - Only guards and admins may list the roster
    - Scoped to the caller's organization
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, active_only: bool = False
    ) -> Result[MemberListResponse]:
        async with self.uow:
            if not principal.is_staff:
                return Return.err(
                    Error("INSUFFICIENT_ROLE", "Only guards and admins can list members")
                )

            members = await TenantDirectory(self.uow).list_members(
                principal.organization_id, active_only=active_only
            )
            return Return.ok(
                MemberListResponse(members=[MemberResponse.from_entity(m) for m in members])
            )
