from sqlmodel.ext.asyncio.session import AsyncSession

from gatepass.adapter.repositories.access_log_repository import AccessLogRepository
from gatepass.adapter.repositories.guest_credential_repository import GuestCredentialRepository
from gatepass.adapter.repositories.guest_repository import GuestRepository
from gatepass.adapter.repositories.member_repository import MemberRepository
from gatepass.adapter.repositories.organization_repository import OrganizationRepository
from gatepass.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.organizations = OrganizationRepository(self.session)
        self.members = MemberRepository(self.session)
        self.guests = GuestRepository(self.session)
        self.guest_credentials = GuestCredentialRepository(self.session)
        self.access_logs = AccessLogRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
