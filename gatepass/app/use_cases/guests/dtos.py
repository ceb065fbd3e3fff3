"""
Guest Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from gatepass.domain.entities import Guest, GuestCredential


class GuestResponse(BaseModel):
    """A registered guest"""

    id: str
    host_member_id: str
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    relationship: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, guest: Guest) -> "GuestResponse":
        return cls(
            id=guest.id,
            host_member_id=guest.host_member_id,
            name=guest.name,
            phone=guest.phone,
            email=guest.email,
            relationship=guest.relationship,
            created_at=guest.created_at,
        )


class GuestCredentialResponse(BaseModel):
    """One visitor pass"""

    id: str
    guest_id: str
    hash: str
    purpose: str
    is_active: bool
    start_at: datetime
    end_at: datetime

    @classmethod
    def from_entity(cls, credential: GuestCredential) -> "GuestCredentialResponse":
        return cls(
            id=credential.id,
            guest_id=credential.guest_id,
            hash=credential.hash,
            purpose=credential.purpose,
            is_active=credential.is_active,
            start_at=credential.start_at,
            end_at=credential.end_at,
        )


class GuestListResponse(BaseModel):
    guests: List[GuestResponse]


class GuestCredentialListResponse(BaseModel):
    credentials: List[GuestCredentialResponse]
