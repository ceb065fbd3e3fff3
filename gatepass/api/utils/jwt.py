from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_jwt(user_id: str, tenant_id: str, role: str, name: str = "") -> str:
    """
    Generate JWT access token

    The login flow lives in the identity provider; this mirrors the token it
    issues so local tooling and tests can mint principals.

    Args:
        user_id: Member or guard ID
        tenant_id: Organization ID
        role: Principal role (member, guard, admin)
        name: Display name, recorded as guard_name on scans

    Returns:
        JWT token string (HS256, 15-minute expiry)
    """
    return create_access_token(user_id, tenant_id, role, timedelta(minutes=15), name=name)


def create_access_token(
    user_id: str, tenant_id: str, role: str, expires_delta: timedelta, name: str = ""
) -> str:
    """
    Create JWT access token with custom expiry

    Returns:
        JWT token string (HS256)
    """
    now = datetime.now(UTC)
    payload = {
        "user_id": user_id,
        "tenant_id": tenant_id,
        "role": role,
        "name": name,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
        return payload
    except JWTError:
        return None
