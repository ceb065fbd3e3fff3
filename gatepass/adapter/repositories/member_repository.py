from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from gatepass.app.repositories.member_repository import IMemberRepository
from gatepass.domain.entities import Member


class MemberRepository(IMemberRepository):
    """Member repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, member_id: str) -> Optional[Member]:
        """Get member by ID, in any organization"""
        stmt = select(Member).where(Member.id == member_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_organization_and_id(
        self, organization_id: str, member_id: str
    ) -> Optional[Member]:
        """Get member by ID within one organization"""
        stmt = select(Member).where(
            Member.organization_id == organization_id, Member.id == member_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_credential(
        self, organization_id: str, credential_hash: str
    ) -> Optional[Member]:
        """Get member holding credential_hash within one organization (idx_member_org_credential)"""
        stmt = select(Member).where(
            Member.organization_id == organization_id,
            Member.credential_hash == credential_hash,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def find_by_credential_any_organization(
        self, credential_hash: str
    ) -> Optional[Member]:
        """Get member holding credential_hash in any organization (idx_member_credential_hash)"""
        stmt = select(Member).where(Member.credential_hash == credential_hash).limit(1)
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_manual_code(
        self, organization_id: str, manual_code: str
    ) -> Optional[Member]:
        """Get member by manual access code within one organization (unique per organization)"""
        stmt = select(Member).where(
            Member.organization_id == organization_id,
            Member.manual_code == manual_code,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_organization(
        self, organization_id: str, active_only: bool = False
    ) -> List[Member]:
        """List the roster of an organization ordered by name"""
        stmt = select(Member).where(Member.organization_id == organization_id)
        if active_only:
            stmt = stmt.where(Member.is_active == True)  # noqa: E712
        stmt = stmt.order_by(Member.name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, member: Member) -> Member:
        """Create a new member"""
        self.session.add(member)
        await self.session.flush()
        await self.session.refresh(member)
        return member

    async def update(self, member: Member) -> Member:
        """Update existing member"""
        self.session.add(member)
        await self.session.flush()
        await self.session.refresh(member)
        return member
