from datetime import datetime
from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from gatepass.app.repositories.guest_credential_repository import IGuestCredentialRepository
from gatepass.domain.entities import GuestCredential


class GuestCredentialRepository(IGuestCredentialRepository):
    """GuestCredential repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, credential_id: str) -> Optional[GuestCredential]:
        """Get guest credential by ID"""
        stmt = select(GuestCredential).where(GuestCredential.id == credential_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_hash(
        self, organization_id: str, credential_hash: str
    ) -> Optional[GuestCredential]:
        """Get guest credential by hash within one organization (idx_guest_credential_org_hash)"""
        stmt = select(GuestCredential).where(
            GuestCredential.organization_id == organization_id,
            GuestCredential.hash == credential_hash,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def find_by_hash_any_organization(
        self, credential_hash: str
    ) -> Optional[GuestCredential]:
        """Get guest credential by hash in any organization (idx_guest_credential_hash)"""
        stmt = select(GuestCredential).where(GuestCredential.hash == credential_hash)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_active_for_guest(
        self, guest_id: str, now: datetime
    ) -> List[GuestCredential]:
        """List active credentials of a guest whose window has not ended"""
        stmt = (
            select(GuestCredential)
            .where(
                GuestCredential.guest_id == guest_id,
                GuestCredential.is_active == True,  # noqa: E712
                GuestCredential.end_at >= now,
            )
            .order_by(GuestCredential.start_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, credential: GuestCredential) -> GuestCredential:
        """Create a new guest credential"""
        self.session.add(credential)
        await self.session.flush()
        await self.session.refresh(credential)
        return credential

    async def update(self, credential: GuestCredential) -> GuestCredential:
        """Update existing guest credential"""
        self.session.add(credential)
        await self.session.flush()
        await self.session.refresh(credential)
        return credential
