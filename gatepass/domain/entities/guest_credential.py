"""
GuestCredential Entity

Time-boxed visitor pass.
"""

from datetime import datetime

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import generate_uuid, utc_now


class GuestCredential(SQLModel, table=True):
    """
    GuestCredential entity - one visitor pass for one guest.

    Business Rules:
    - hash is unique per issuance and carries the guest discriminator prefix
    - Valid while is_active and start_at <= now <= end_at (inclusive both ends)
    - Not single-use: may be scanned repeatedly inside its window
    - Deactivating one pass never touches the guest's other passes
    """

    __tablename__ = "guest_credentials"

    id: str = Field(default_factory=generate_uuid, primary_key=True, max_length=64)
    guest_id: str = Field(foreign_key="guests.id", nullable=False, index=True)
    organization_id: str = Field(foreign_key="organizations.id", nullable=False)

    hash: str = Field(max_length=128)
    purpose: str = Field(max_length=255)

    is_active: bool = Field(default=True)
    start_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    end_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_guest_credential_hash", "hash", unique=True),
        Index("idx_guest_credential_org_hash", "organization_id", "hash"),
    )
