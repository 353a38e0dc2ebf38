"""Single source of "now" for timestamps and token expiry."""

from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
