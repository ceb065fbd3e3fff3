from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from gatepass.app.repositories.guest_repository import IGuestRepository
from gatepass.domain.entities import Guest


class GuestRepository(IGuestRepository):
    """Guest repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, guest_id: str) -> Optional[Guest]:
        """Get guest by ID"""
        stmt = select(Guest).where(Guest.id == guest_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_host(self, organization_id: str, host_member_id: str) -> List[Guest]:
        """List guests of a host member, newest first"""
        stmt = (
            select(Guest)
            .where(
                Guest.organization_id == organization_id,
                Guest.host_member_id == host_member_id,
            )
            .order_by(Guest.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, guest: Guest) -> Guest:
        """Create a new guest"""
        self.session.add(guest)
        await self.session.flush()
        await self.session.refresh(guest)
        return guest
