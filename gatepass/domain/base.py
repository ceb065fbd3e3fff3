import uuid
from datetime import UTC, datetime


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Current time as naive UTC, the form every timestamp column stores"""
    return datetime.now(UTC).replace(tzinfo=None)


def to_naive_utc(dt: datetime) -> datetime:
    """Normalize datetime for columns defined as TIMESTAMP WITHOUT TIME ZONE.

    Aware datetimes are converted to UTC and stripped. Naive ones are assumed
    to already be UTC.
    """
    if dt.tzinfo is not None:
        return dt.astimezone(UTC).replace(tzinfo=None)
    return dt
