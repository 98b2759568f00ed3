"""Clock helpers."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime.

    Report timestamps and record ids are derived from this value.
    """
    return datetime.now(timezone.utc)
