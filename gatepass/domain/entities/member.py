"""
Member Entity

Represents a resident who presents a credential at the gate.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import generate_uuid, utc_now
from .enums import AccessLevel


class Member(SQLModel, table=True):
    """
    Member entity - a resident of one organization.

    Business Rules:
    - Created at registration, never deleted by this service
    - Deactivation is is_active=False, which denies every scan
    - credential_hash / credential_expiry / manual_code are written only by credential issuance
    - (organization_id, credential_hash) is indexed so a scan never scans the table
    """

    __tablename__ = "members"

    id: str = Field(default_factory=generate_uuid, primary_key=True, max_length=64)
    organization_id: str = Field(foreign_key="organizations.id", nullable=False, index=True)

    name: str = Field(max_length=255)
    email: str = Field(max_length=255)

    is_active: bool = Field(default=True)
    access_level: AccessLevel = Field(default=AccessLevel.resident)

    # Shown to the guard on a granted scan
    home_address: Optional[str] = Field(default=None, max_length=255)
    vehicle_info: Optional[str] = Field(default=None, max_length=255)

    # Credential (nullable until first issuance)
    credential_hash: Optional[str] = Field(default=None, max_length=64)
    credential_expiry: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    manual_code: Optional[str] = Field(default=None, max_length=6)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_member_org_credential", "organization_id", "credential_hash"),
        Index("idx_member_credential_hash", "credential_hash"),
        Index("idx_member_org_manual_code", "organization_id", "manual_code", unique=True),
    )
