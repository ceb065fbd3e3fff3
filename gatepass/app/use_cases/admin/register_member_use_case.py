"""
Use Case: Register Member

Adds a resident to an organization's roster. Stands in for the external
registration system; credentials are issued later by the member.
"""

from typing import Optional

from pydantic import BaseModel

from gatepass.libs.result import Error, Result, Return
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.domain.entities import AccessLevel, Member


class RegisterMemberResponse(BaseModel):
    """Response DTO for RegisterMemberUseCase"""

    id: str
    organization_id: str
    name: str
    email: str
    access_level: str
    is_active: bool


class RegisterMemberUseCase:
    """Register a member; the new member has no credential until one is issued"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        organization_id: str,
        name: str,
        email: str,
        access_level: str = AccessLevel.resident.value,
        home_address: Optional[str] = None,
        vehicle_info: Optional[str] = None,
        member_id: Optional[str] = None,
    ) -> Result[RegisterMemberResponse]:
        async with self.uow:
            try:
                level = AccessLevel(access_level)
            except ValueError:
                return Return.err(
                    Error(
                        "INVALID_ACCESS_LEVEL",
                        f"Invalid access level: {access_level}. Must be one of: resident, restricted",
                    )
                )

            organization = await self.uow.organizations.get_by_id(organization_id)
            if organization is None:
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organization not found"))

            if member_id and await self.uow.members.get_by_id(member_id):
                return Return.err(Error("MEMBER_EXISTS", "A member with this ID already exists"))

            member = Member(
                organization_id=organization.id,
                name=name,
                email=email,
                access_level=level,
                home_address=home_address,
                vehicle_info=vehicle_info,
            )
            if member_id:
                member.id = member_id

            await self.uow.members.create(member)
            await self.uow.commit()

            return Return.ok(
                RegisterMemberResponse(
                    id=member.id,
                    organization_id=member.organization_id,
                    name=member.name,
                    email=member.email,
                    access_level=level.value,
                    is_active=member.is_active,
                )
            )
