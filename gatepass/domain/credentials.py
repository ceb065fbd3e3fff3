"""
Credential derivation.

Member credential hashes are a pure function of identity (organization,
member, email) so re-issuing before expiry returns the same hash. Guest
credential hashes are random per issuance and carry a fixed prefix that routes
them to the guest store without a tenant lookup.
"""

import hashlib
import hmac
import secrets

GUEST_CREDENTIAL_PREFIX = "guest_"
MANUAL_CODE_LENGTH = 6
MANUAL_CODE_MAX_ATTEMPTS = 32


def derive_member_credential_hash(
    secret: str, organization_id: str, member_id: str, email: str
) -> str:
    """HMAC-SHA256 over the member's identity attributes, hex encoded (64 chars)"""
    message = "|".join((organization_id, member_id, email.strip().lower()))
    return hmac.new(secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).hexdigest()


def derive_manual_code(
    secret: str, organization_id: str, member_id: str, attempt: int = 0
) -> str:
    """Six digit code in 100000..999999 for typing at the gate when a scan fails.

    Codes can collide inside an organization; the issuer bumps attempt until
    the code is free. Attempt 0 keeps the unsalted form.
    """
    message = f"manual|{organization_id}|{member_id}"
    if attempt:
        message = f"{message}|{attempt}"
    digest = hmac.new(secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).digest()
    return str(int.from_bytes(digest[:8], "big") % 900000 + 100000)


def new_guest_credential_hash() -> str:
    return GUEST_CREDENTIAL_PREFIX + secrets.token_urlsafe(24)


def is_guest_credential(presented: str) -> bool:
    return presented.startswith(GUEST_CREDENTIAL_PREFIX)


def is_manual_code(presented: str) -> bool:
    return len(presented) == MANUAL_CODE_LENGTH and presented.isdigit()
