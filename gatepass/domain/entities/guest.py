"""
Guest Entity

A visitor registered under a host member.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from ..base import generate_uuid, utc_now


class Guest(SQLModel, table=True):
    """
    Guest entity - a non-member visitor hosted by a member.

    Business Rules:
    - Belongs to the host member's organization
    - May hold any number of guest credentials, each with its own window
    """

    __tablename__ = "guests"

    id: str = Field(default_factory=generate_uuid, primary_key=True, max_length=64)
    organization_id: str = Field(foreign_key="organizations.id", nullable=False, index=True)
    host_member_id: str = Field(foreign_key="members.id", nullable=False, index=True)

    name: str = Field(max_length=255)
    phone: Optional[str] = Field(default=None, max_length=32)
    email: Optional[str] = Field(default=None, max_length=255)
    relationship: Optional[str] = Field(default=None, max_length=100)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
