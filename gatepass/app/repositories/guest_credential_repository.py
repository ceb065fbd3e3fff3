from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from gatepass.domain.entities import GuestCredential


class IGuestCredentialRepository(ABC):
    """GuestCredential repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, credential_id: str) -> Optional[GuestCredential]:
        """Get guest credential by ID"""
        pass

    @abstractmethod
    async def get_by_hash(
        self, organization_id: str, credential_hash: str
    ) -> Optional[GuestCredential]:
        """Get guest credential by hash within one organization (indexed)"""
        pass

    @abstractmethod
    async def find_by_hash_any_organization(
        self, credential_hash: str
    ) -> Optional[GuestCredential]:
        """Get guest credential by hash in any organization (indexed)"""
        pass

    @abstractmethod
    async def list_active_for_guest(
        self, guest_id: str, now: datetime
    ) -> List[GuestCredential]:
        """List active credentials of a guest whose window has not ended"""
        pass

    @abstractmethod
    async def create(self, credential: GuestCredential) -> GuestCredential:
        """Create a new guest credential"""
        pass

    @abstractmethod
    async def update(self, credential: GuestCredential) -> GuestCredential:
        """Update existing guest credential"""
        pass
