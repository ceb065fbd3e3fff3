"""
Use Case: Deactivate / Reactivate Member

Members are never deleted. Deactivation flips is_active and every later scan
of the member's credential is denied with INACTIVE.
"""

import logging

from pydantic import BaseModel

from gatepass.libs.result import Error, Result, Return
from gatepass.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class SetMemberActiveResponse(BaseModel):
    """Response DTO for SetMemberActiveUseCase"""

    member_id: str
    is_active: bool


class SetMemberActiveUseCase:
    """
    Toggle a member's active flag.

    Idempotent: setting the current value succeeds without a write.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, member_id: str, is_active: bool) -> Result[SetMemberActiveResponse]:
        async with self.uow:
            member = await self.uow.members.get_by_id(member_id)
            if member is None:
                return Return.err(Error("MEMBER_NOT_FOUND", "Member not found"))

            if member.is_active != is_active:
                member.is_active = is_active
                await self.uow.members.update(member)
                await self.uow.commit()
                logger.info(
                    "Member %s %s in organization %s",
                    member.id,
                    "reactivated" if is_active else "deactivated",
                    member.organization_id,
                )

            return Return.ok(SetMemberActiveResponse(member_id=member.id, is_active=is_active))
