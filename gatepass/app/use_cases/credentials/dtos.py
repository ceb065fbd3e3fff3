"""
Credential Use Case DTOs (Data Transfer Objects)

Response classes for issuance and validation.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from gatepass.domain.entities import DenialReason


# ============================================================================
# Response DTOs
# ============================================================================


class CredentialResponse(BaseModel):
    """Response for issue member credential use case"""

    member_id: str
    hash: str
    expiry: datetime
    manual_code: str


class SubjectInfo(BaseModel):
    """Who a granted (or identified) credential belongs to"""

    subject_id: str
    subject_type: str
    name: str
    # member path
    access_level: Optional[str] = None
    home_address: Optional[str] = None
    vehicle_info: Optional[str] = None
    # guest path
    host_member_id: Optional[str] = None
    host_name: Optional[str] = None
    purpose: Optional[str] = None
    valid_from: Optional[datetime] = None
    valid_until: Optional[datetime] = None


class Decision(BaseModel):
    """Outcome of one validation attempt"""

    granted: bool
    reason: Optional[DenialReason] = None
    message: str
    subject: Optional[SubjectInfo] = None
    checked_at: datetime
    audit_recorded: bool = False
