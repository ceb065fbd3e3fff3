"""Admin use cases standing in for the external registration system."""

from .create_organization_use_case import (
    CreateOrganizationResponse,
    CreateOrganizationUseCase,
)
from .register_member_use_case import RegisterMemberResponse, RegisterMemberUseCase
from .set_member_active_use_case import SetMemberActiveResponse, SetMemberActiveUseCase

__all__ = [
    "CreateOrganizationUseCase",
    "CreateOrganizationResponse",
    "RegisterMemberUseCase",
    "RegisterMemberResponse",
    "SetMemberActiveUseCase",
    "SetMemberActiveResponse",
]
