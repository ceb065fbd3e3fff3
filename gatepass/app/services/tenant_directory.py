"""
Tenant Directory

Resolves organizations and their member roster. Every lookup a use case
makes about "who belongs where" goes through here.
"""

from datetime import timedelta
from typing import List, Optional

from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.domain.entities import Member, Organization

DEFAULT_CREDENTIAL_TTL_HOURS = 24


class TenantDirectory:
    """Read-only view over organizations and members, bound to an open unit of work"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def get_organization(self, organization_id: str) -> Optional[Organization]:
        return await self.uow.organizations.get_by_id(organization_id)

    async def list_members(
        self, organization_id: str, active_only: bool = False
    ) -> List[Member]:
        return await self.uow.members.list_by_organization(
            organization_id, active_only=active_only
        )

    async def find_member(self, organization_id: str, member_id: str) -> Optional[Member]:
        """Tenant-scoped member lookup"""
        return await self.uow.members.get_by_organization_and_id(organization_id, member_id)

    async def locate_member(self, member_id: str) -> Optional[Member]:
        """Unscoped lookup, only for telling an absent member from a foreign one"""
        return await self.uow.members.get_by_id(member_id)

    async def credential_ttl(self, organization_id: str) -> timedelta:
        organization = await self.get_organization(organization_id)
        hours = DEFAULT_CREDENTIAL_TTL_HOURS
        if organization is not None and organization.credential_ttl_hours:
            hours = organization.credential_ttl_hours
        return timedelta(hours=hours)
