"""
Organization Entity

Represents a gated community, the isolation boundary for all lookups.
"""

from datetime import datetime

from sqlmodel import Column, DateTime, Field, SQLModel

from ..base import generate_uuid, utc_now
from .enums import CommunityType


class Organization(SQLModel, table=True):
    """
    Organization entity - one gated community (tenant).

    Business Rules:
    - Every member, guest, credential and access log belongs to exactly one organization
    - credential_ttl_hours controls how long an issued member credential stays valid
    """

    __tablename__ = "organizations"

    id: str = Field(default_factory=generate_uuid, primary_key=True, max_length=64)
    name: str = Field(max_length=255)

    community_type: CommunityType = Field(default=CommunityType.house_based)

    credential_ttl_hours: int = Field(default=24, ge=1)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
