from abc import ABC, abstractmethod
from typing import Optional

from gatepass.domain.entities import Organization


class IOrganizationRepository(ABC):
    """Organization repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, organization_id: str) -> Optional[Organization]:
        """Get organization by ID"""
        pass

    @abstractmethod
    async def create(self, organization: Organization) -> Organization:
        """Create a new organization"""
        pass
