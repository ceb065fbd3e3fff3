import base64
from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import and_, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from gatepass.app.repositories.access_log_repository import IAccessLogRepository
from gatepass.domain.entities import AccessLogEntry, SubjectType


class AccessLogRepository(IAccessLogRepository):
    """AccessLogEntry repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entry: AccessLogEntry) -> AccessLogEntry:
        """Append a new access log entry (immutable)"""
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def get_by_organization_paginated(
        self,
        organization_id: str,
        limit: int = 50,
        cursor: Optional[str] = None,
        subject_type: Optional[SubjectType] = None,
    ) -> Tuple[List[AccessLogEntry], Optional[str]]:
        """
        Get access log entries for an organization with cursor-based pagination.

        Cursor format: base64-encoded "<ISO timestamp>|<id>" of the last entry
        returned. Entries sharing a timestamp are ordered by id, so a page
        boundary inside a burst of identical timestamps skips nothing.
        """
        stmt = select(AccessLogEntry).where(AccessLogEntry.organization_id == organization_id)

        if subject_type is not None:
            stmt = stmt.where(AccessLogEntry.subject_type == subject_type)

        if cursor:
            try:
                cursor_str = base64.b64decode(cursor).decode("utf-8")
                cursor_timestamp_str, _, cursor_id = cursor_str.partition("|")
                cursor_timestamp = datetime.fromisoformat(cursor_timestamp_str)
                if cursor_id:
                    stmt = stmt.where(
                        or_(
                            AccessLogEntry.timestamp < cursor_timestamp,
                            and_(
                                AccessLogEntry.timestamp == cursor_timestamp,
                                AccessLogEntry.id < cursor_id,
                            ),
                        )
                    )
                else:
                    stmt = stmt.where(AccessLogEntry.timestamp < cursor_timestamp)
            except (ValueError, TypeError):
                # Invalid cursor, ignore and return from beginning
                pass

        stmt = stmt.order_by(
            AccessLogEntry.timestamp.desc(), AccessLogEntry.id.desc()
        ).limit(limit + 1)

        result = await self.session.exec(stmt)
        entries = list(result.all())

        has_more = len(entries) > limit
        if has_more:
            entries = entries[:limit]

        next_cursor = None
        if has_more and entries:
            last = entries[-1]
            cursor_str = f"{last.timestamp.isoformat()}|{last.id}"
            next_cursor = base64.b64encode(cursor_str.encode("utf-8")).decode("utf-8")

        return entries, next_cursor

    async def list_granted_for_subject(
        self, organization_id: str, subject_id: str, limit: int = 50
    ) -> List[AccessLogEntry]:
        """Granted entries for one subject, newest first (idx_access_log_subject)"""
        stmt = (
            select(AccessLogEntry)
            .where(
                AccessLogEntry.organization_id == organization_id,
                AccessLogEntry.subject_id == subject_id,
                AccessLogEntry.granted == True,  # noqa: E712
            )
            .order_by(AccessLogEntry.timestamp.desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
