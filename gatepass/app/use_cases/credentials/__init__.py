"""
Credential Use Cases

Member credential issuance and gate validation.
"""

from .dtos import CredentialResponse, Decision, SubjectInfo
from .issue_member_credential_use_case import IssueMemberCredentialUseCase
from .validate_credential_use_case import ValidateCredentialUseCase

__all__ = [
    "IssueMemberCredentialUseCase",
    "ValidateCredentialUseCase",
    "CredentialResponse",
    "Decision",
    "SubjectInfo",
]
