"""
Guest Use Cases

Visitor registration and time-boxed guest credentials.
"""

from .deactivate_guest_credential_use_case import DeactivateGuestCredentialUseCase
from .dtos import (
    GuestCredentialListResponse,
    GuestCredentialResponse,
    GuestListResponse,
    GuestResponse,
)
from .issue_guest_credential_use_case import IssueGuestCredentialUseCase
from .list_active_guest_credentials_use_case import ListActiveGuestCredentialsUseCase
from .list_host_guests_use_case import ListHostGuestsUseCase
from .register_guest_use_case import RegisterGuestUseCase

__all__ = [
    "RegisterGuestUseCase",
    "IssueGuestCredentialUseCase",
    "ListActiveGuestCredentialsUseCase",
    "ListHostGuestsUseCase",
    "DeactivateGuestCredentialUseCase",
    "GuestResponse",
    "GuestCredentialResponse",
    "GuestListResponse",
    "GuestCredentialListResponse",
]
