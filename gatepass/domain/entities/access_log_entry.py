"""
AccessLogEntry Entity

Immutable record of one validation attempt.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import generate_uuid, utc_now
from .enums import DenialReason, SubjectType


class AccessLogEntry(SQLModel, table=True):
    """
    AccessLogEntry entity - audit trail of gate scans.

    Business Rules:
    - Append-only (never updated or deleted)
    - Exactly one entry per validation attempt, granted or denied
    - subject_* fields are empty when no credential matched in the guard's organization
    """

    __tablename__ = "access_logs"

    id: str = Field(default_factory=generate_uuid, primary_key=True, max_length=64)
    organization_id: str = Field(nullable=False, index=True)

    subject_id: Optional[str] = Field(default=None, max_length=64)
    subject_name: Optional[str] = Field(default=None, max_length=255)
    subject_type: Optional[SubjectType] = Field(default=None)

    guard_id: str = Field(max_length=64)
    guard_name: str = Field(max_length=255)

    granted: bool
    credential_hash: str = Field(max_length=128)
    denial_reason: Optional[DenialReason] = Field(default=None)
    purpose: Optional[str] = Field(default=None, max_length=255)

    timestamp: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_access_log_org_timestamp", "organization_id", "timestamp"),
        Index("idx_access_log_subject", "organization_id", "subject_id", "granted"),
    )
