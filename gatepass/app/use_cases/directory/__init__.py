"""
Directory Use Cases

Organization and roster lookups.
"""

from .dtos import MemberListResponse, MemberResponse, OrganizationResponse
from .get_organization_use_case import GetOrganizationUseCase
from .list_members_use_case import ListMembersUseCase

__all__ = [
    "GetOrganizationUseCase",
    "ListMembersUseCase",
    "OrganizationResponse",
    "MemberResponse",
    "MemberListResponse",
]
