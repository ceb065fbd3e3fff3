"""
Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class CommunityType(str, Enum):
    """How a gated community is laid out"""

    house_based = "house_based"
    tower_based = "tower_based"
    mixed = "mixed"


class AccessLevel(str, Enum):
    """Member access level within a community"""

    resident = "resident"
    restricted = "restricted"


class SubjectType(str, Enum):
    """Kind of credential owner"""

    member = "member"
    guest = "guest"


class PrincipalRole(str, Enum):
    """Role carried by an authenticated principal"""

    member = "member"
    guard = "guard"
    admin = "admin"


class DenialReason(str, Enum):
    """Why a presented credential was not accepted"""

    NOT_FOUND = "NOT_FOUND"
    CROSS_TENANT_MISMATCH = "CROSS_TENANT_MISMATCH"
    EXPIRED = "EXPIRED"
    NOT_YET_VALID = "NOT_YET_VALID"
    INACTIVE = "INACTIVE"
