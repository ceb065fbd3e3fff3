"""
Access Log Use Cases

Read side of the gate audit trail.
"""

from .dtos import AccessLogEntryResponse, AccessLogsResponse, MemberAccessHistoryResponse
from .get_access_logs_use_case import GetAccessLogsUseCase
from .get_member_access_history_use_case import GetMemberAccessHistoryUseCase

__all__ = [
    "GetAccessLogsUseCase",
    "GetMemberAccessHistoryUseCase",
    "AccessLogEntryResponse",
    "AccessLogsResponse",
    "MemberAccessHistoryResponse",
]
