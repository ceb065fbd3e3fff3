"""
Credential subjects.

The validator resolves a presented credential once into either a
MemberSubject or a GuestSubject. Both expose the same validity surface so the
grant/deny rules are shared.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from .entities import AccessLevel, Guest, GuestCredential, Member, SubjectType


@dataclass(frozen=True)
class MemberSubject:
    member: Member

    subject_type = SubjectType.member

    @property
    def id(self) -> str:
        return self.member.id

    @property
    def name(self) -> str:
        return self.member.name

    @property
    def is_active(self) -> bool:
        return self.member.is_active

    @property
    def valid_from(self) -> Optional[datetime]:
        return None

    @property
    def valid_until(self) -> Optional[datetime]:
        return self.member.credential_expiry

    @property
    def purpose(self) -> Optional[str]:
        return None

    def payload(self) -> dict:
        access_level = self.member.access_level
        return {
            "subject_id": self.member.id,
            "subject_type": SubjectType.member.value,
            "name": self.member.name,
            "access_level": AccessLevel(access_level).value,
            "home_address": self.member.home_address,
            "vehicle_info": self.member.vehicle_info,
            "valid_until": self.member.credential_expiry,
        }


@dataclass(frozen=True)
class GuestSubject:
    guest: Guest
    credential: GuestCredential
    host: Optional[Member] = None

    subject_type = SubjectType.guest

    @property
    def id(self) -> str:
        return self.guest.id

    @property
    def name(self) -> str:
        return self.guest.name

    @property
    def is_active(self) -> bool:
        return self.credential.is_active

    @property
    def valid_from(self) -> Optional[datetime]:
        return self.credential.start_at

    @property
    def valid_until(self) -> Optional[datetime]:
        return self.credential.end_at

    @property
    def purpose(self) -> Optional[str]:
        return self.credential.purpose

    def payload(self) -> dict:
        return {
            "subject_id": self.guest.id,
            "subject_type": SubjectType.guest.value,
            "name": self.guest.name,
            "host_member_id": self.guest.host_member_id,
            "host_name": self.host.name if self.host else None,
            "purpose": self.credential.purpose,
            "valid_from": self.credential.start_at,
            "valid_until": self.credential.end_at,
        }


Subject = Union[MemberSubject, GuestSubject]
