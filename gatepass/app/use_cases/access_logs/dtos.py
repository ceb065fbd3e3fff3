"""
Access Log Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from gatepass.domain.entities import AccessLogEntry


class AccessLogEntryResponse(BaseModel):
    """Single access log entry in response"""

    id: str
    subject_id: Optional[str] = None
    subject_name: Optional[str] = None
    subject_type: Optional[str] = None
    guard_id: str
    guard_name: str
    timestamp: datetime
    granted: bool
    denial_reason: Optional[str] = None
    purpose: Optional[str] = None

    @classmethod
    def from_entity(cls, entry: AccessLogEntry) -> "AccessLogEntryResponse":
        return cls(
            id=entry.id,
            subject_id=entry.subject_id,
            subject_name=entry.subject_name,
            subject_type=entry.subject_type.value if entry.subject_type else None,
            guard_id=entry.guard_id,
            guard_name=entry.guard_name,
            timestamp=entry.timestamp,
            granted=entry.granted,
            denial_reason=entry.denial_reason.value if entry.denial_reason else None,
            purpose=entry.purpose,
        )


class AccessLogsResponse(BaseModel):
    """Page of access log entries"""

    entries: List[AccessLogEntryResponse]
    next_cursor: Optional[str] = None


class MemberAccessHistoryResponse(BaseModel):
    """Granted entries of one member"""

    member_id: str
    entries: List[AccessLogEntryResponse]
