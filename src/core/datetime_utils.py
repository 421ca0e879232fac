"""UTC datetime helpers.

All timestamps in the system are timezone-aware UTC. SQLite drops tzinfo
on the way back from the database, so anything read from storage passes
through ensure_utc before it reaches the domain.
"""

from datetime import UTC, datetime, time


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """Return value as an aware UTC datetime.

    Naive datetimes are assumed to already be UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def start_of_today() -> datetime:
    """Midnight (UTC) of the current day."""
    return datetime.combine(utc_now().date(), time.min, tzinfo=UTC)
