"""UTC timestamp helpers shared by the operation executor and HTTP client."""

from datetime import UTC, datetime

LOG_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def format_log_time(dt: datetime) -> str:
    """Render a datetime the way operation log lines show it."""
    return dt.strftime(LOG_TIME_FORMAT)


def to_iso8601(dt: datetime | None) -> str | None:
    """Convert datetime to ISO8601 string."""
    if dt is None:
        return None
    return dt.isoformat()
