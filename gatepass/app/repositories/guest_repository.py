from abc import ABC, abstractmethod
from typing import List, Optional

from gatepass.domain.entities import Guest


class IGuestRepository(ABC):
    """Guest repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, guest_id: str) -> Optional[Guest]:
        """Get guest by ID"""
        pass

    @abstractmethod
    async def list_by_host(self, organization_id: str, host_member_id: str) -> List[Guest]:
        """List guests of a host member, newest first"""
        pass

    @abstractmethod
    async def create(self, guest: Guest) -> Guest:
        """Create a new guest"""
        pass
