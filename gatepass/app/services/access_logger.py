"""
Access Logger

Appends one AccessLogEntry per validation attempt. Writing is best effort:
a failed write is reported to the log and never reaches the guard, because a
gate decision cannot wait on the audit store.
"""

import logging

from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.domain.entities import AccessLogEntry

logger = logging.getLogger("gatepass.access_log")


class AccessLogger:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def record(self, entry: AccessLogEntry) -> bool:
        """Append and commit entry. Returns False when the write failed."""
        try:
            await self.uow.access_logs.create(entry)
            await self.uow.commit()
            return True
        except Exception:
            logger.exception(
                "LOG_WRITE_FAILURE organization=%s guard=%s granted=%s reason=%s",
                entry.organization_id,
                entry.guard_id,
                entry.granted,
                entry.denial_reason.value if entry.denial_reason else None,
            )
            try:
                await self.uow.rollback()
            except Exception:
                logger.exception("Rollback after access log failure also failed")
            return False
