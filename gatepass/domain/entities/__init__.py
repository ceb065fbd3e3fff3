"""
Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AccessLevel,
    CommunityType,
    DenialReason,
    PrincipalRole,
    SubjectType,
)

# Export all entities
from .organization import Organization
from .member import Member
from .guest import Guest
from .guest_credential import GuestCredential
from .access_log_entry import AccessLogEntry

__all__ = [
    # Enums
    "AccessLevel",
    "CommunityType",
    "DenialReason",
    "PrincipalRole",
    "SubjectType",
    # Entities
    "Organization",
    "Member",
    "Guest",
    "GuestCredential",
    "AccessLogEntry",
]
