"""
Get Access Logs Use Case

Retrieves gate access log entries for an organization with pagination.
"""

from typing import Optional

from gatepass.libs.result import Error, Result, Return
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.domain.entities import SubjectType
from gatepass.domain.principal import Principal

from .dtos import AccessLogEntryResponse, AccessLogsResponse


class GetAccessLogsUseCase:
    """
    Use case for retrieving access log entries for an organization.

    Business Rules:
    - Caller must be a guard or an admin
    - Results are scoped to the caller's organization
    - Results ordered by newest first, cursor-based pagination
    - Optional filter by subject type (member / guest)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        limit: int = 50,
        cursor: Optional[str] = None,
        subject_type: Optional[SubjectType] = None,
    ) -> Result[AccessLogsResponse]:
        async with self.uow:
            if not principal.is_staff:
                return Return.err(
                    Error(
                        "INSUFFICIENT_ROLE",
                        "You do not have permission to view access logs",
                    )
                )

            entries, next_cursor = await self.uow.access_logs.get_by_organization_paginated(
                principal.organization_id,
                limit=limit,
                cursor=cursor,
                subject_type=subject_type,
            )

            return Return.ok(
                AccessLogsResponse(
                    entries=[AccessLogEntryResponse.from_entity(e) for e in entries],
                    next_cursor=next_cursor,
                )
            )
