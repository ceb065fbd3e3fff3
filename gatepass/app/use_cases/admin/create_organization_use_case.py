"""
Use Case: Create Organization

Onboards a gated community. Stands in for the external registration system.
"""

from typing import Optional

from pydantic import BaseModel

from gatepass.libs.result import Error, Result, Return
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.domain.entities import CommunityType, Organization


class CreateOrganizationResponse(BaseModel):
    """Response DTO for CreateOrganizationUseCase"""

    id: str
    name: str
    community_type: str
    credential_ttl_hours: int


class CreateOrganizationUseCase:
    """
    Create an organization.

    Business Logic:
    1. Validate community type and credential TTL
    2. Reject a caller-supplied ID that already exists
    3. Persist the organization
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        name: str,
        community_type: str = CommunityType.house_based.value,
        credential_ttl_hours: int = 24,
        organization_id: Optional[str] = None,
    ) -> Result[CreateOrganizationResponse]:
        async with self.uow:
            try:
                kind = CommunityType(community_type)
            except ValueError:
                return Return.err(
                    Error(
                        "INVALID_COMMUNITY_TYPE",
                        f"Invalid community type: {community_type}. "
                        "Must be one of: house_based, tower_based, mixed",
                    )
                )

            if credential_ttl_hours < 1:
                return Return.err(
                    Error("INVALID_TTL", "Credential TTL must be at least one hour")
                )

            if organization_id and await self.uow.organizations.get_by_id(organization_id):
                return Return.err(
                    Error("ORGANIZATION_EXISTS", "An organization with this ID already exists")
                )

            organization = Organization(
                name=name,
                community_type=kind,
                credential_ttl_hours=credential_ttl_hours,
            )
            if organization_id:
                organization.id = organization_id

            await self.uow.organizations.create(organization)
            await self.uow.commit()

            return Return.ok(
                CreateOrganizationResponse(
                    id=organization.id,
                    name=organization.name,
                    community_type=kind.value,
                    credential_ttl_hours=organization.credential_ttl_hours,
                )
            )
