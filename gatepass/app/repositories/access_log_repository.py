from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from gatepass.domain.entities import AccessLogEntry, SubjectType


class IAccessLogRepository(ABC):
    """AccessLogEntry repository interface - application layer"""

    @abstractmethod
    async def create(self, entry: AccessLogEntry) -> AccessLogEntry:
        """Append a new access log entry (immutable)"""
        pass

    @abstractmethod
    async def get_by_organization_paginated(
        self,
        organization_id: str,
        limit: int = 50,
        cursor: Optional[str] = None,
        subject_type: Optional[SubjectType] = None,
    ) -> Tuple[List[AccessLogEntry], Optional[str]]:
        """
        Get access log entries for an organization with cursor-based pagination.

        Returns:
            Tuple of (entries list, next_cursor)
            - entries: List of entries ordered by timestamp DESC
            - next_cursor: Cursor for next page, None if no more entries
        """
        pass

    @abstractmethod
    async def list_granted_for_subject(
        self, organization_id: str, subject_id: str, limit: int = 50
    ) -> List[AccessLogEntry]:
        """Granted entries for one subject, newest first"""
        pass
