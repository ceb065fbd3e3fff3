"""
Directory Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from gatepass.domain.entities import AccessLevel, CommunityType, Member, Organization


class OrganizationResponse(BaseModel):
    id: str
    name: str
    community_type: str
    credential_ttl_hours: int

    @classmethod
    def from_entity(cls, organization: Organization) -> "OrganizationResponse":
        return cls(
            id=organization.id,
            name=organization.name,
            community_type=CommunityType(organization.community_type).value,
            credential_ttl_hours=organization.credential_ttl_hours,
        )


class MemberResponse(BaseModel):
    """Roster entry; credential material is never exposed here"""

    id: str
    organization_id: str
    name: str
    email: str
    is_active: bool
    access_level: str
    home_address: Optional[str] = None
    vehicle_info: Optional[str] = None

    @classmethod
    def from_entity(cls, member: Member) -> "MemberResponse":
        return cls(
            id=member.id,
            organization_id=member.organization_id,
            name=member.name,
            email=member.email,
            is_active=member.is_active,
            access_level=AccessLevel(member.access_level).value,
            home_address=member.home_address,
            vehicle_info=member.vehicle_info,
        )


class MemberListResponse(BaseModel):
    members: List[MemberResponse]
