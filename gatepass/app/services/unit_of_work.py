from abc import ABC, abstractmethod

from gatepass.app.repositories.access_log_repository import IAccessLogRepository
from gatepass.app.repositories.guest_credential_repository import IGuestCredentialRepository
from gatepass.app.repositories.guest_repository import IGuestRepository
from gatepass.app.repositories.member_repository import IMemberRepository
from gatepass.app.repositories.organization_repository import IOrganizationRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    organizations: IOrganizationRepository
    members: IMemberRepository
    guests: IGuestRepository
    guest_credentials: IGuestCredentialRepository
    access_logs: IAccessLogRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
