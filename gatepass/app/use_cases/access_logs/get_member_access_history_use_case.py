"""
Get Member Access History Use Case
"""

from gatepass.libs.result import Error, Result, Return
from gatepass.app.services.tenant_directory import TenantDirectory
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.domain.entities import PrincipalRole
from gatepass.domain.principal import Principal

from .dtos import AccessLogEntryResponse, MemberAccessHistoryResponse


class GetMemberAccessHistoryUseCase:
    """
    Use case for a member's history of granted entries.

    Business Rules:
    - Members may only read their own history
    - Member must belong to the caller's organization
    - Only granted entries are returned, newest first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, member_id: str, limit: int = 50
    ) -> Result[MemberAccessHistoryResponse]:
        async with self.uow:
            if principal.role == PrincipalRole.member and principal.id != member_id:
                return Return.err(
                    Error("UNAUTHORIZED", "Members can only view their own access history")
                )

            member = await TenantDirectory(self.uow).find_member(
                principal.organization_id, member_id
            )
            if member is None:
                return Return.err(Error("MEMBER_NOT_FOUND", "Member not found"))

            entries = await self.uow.access_logs.list_granted_for_subject(
                principal.organization_id, member.id, limit=limit
            )
            return Return.ok(
                MemberAccessHistoryResponse(
                    member_id=member.id,
                    entries=[AccessLogEntryResponse.from_entity(e) for e in entries],
                )
            )
