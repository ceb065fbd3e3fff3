from abc import ABC, abstractmethod
from typing import List, Optional

from gatepass.domain.entities import Member


class IMemberRepository(ABC):
    """Member repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, member_id: str) -> Optional[Member]:
        """Get member by ID, in any organization"""
        pass

    @abstractmethod
    async def get_by_organization_and_id(
        self, organization_id: str, member_id: str
    ) -> Optional[Member]:
        """Get member by ID within one organization"""
        pass

    @abstractmethod
    async def get_by_credential(
        self, organization_id: str, credential_hash: str
    ) -> Optional[Member]:
        """Get member holding credential_hash within one organization (indexed)"""
        pass

    @abstractmethod
    async def find_by_credential_any_organization(
        self, credential_hash: str
    ) -> Optional[Member]:
        """Get member holding credential_hash in any organization (indexed)"""
        pass

    @abstractmethod
    async def get_by_manual_code(
        self, organization_id: str, manual_code: str
    ) -> Optional[Member]:
        """Get member by manual access code within one organization"""
        pass

    @abstractmethod
    async def list_by_organization(
        self, organization_id: str, active_only: bool = False
    ) -> List[Member]:
        """List the roster of an organization ordered by name"""
        pass

    @abstractmethod
    async def create(self, member: Member) -> Member:
        """Create a new member"""
        pass

    @abstractmethod
    async def update(self, member: Member) -> Member:
        """Update existing member"""
        pass
