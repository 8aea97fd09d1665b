"""Shared helpers for model timestamps."""

from datetime import UTC, datetime


def _utc_now() -> datetime:
    """Timezone-aware current time in UTC."""
    return datetime.now(UTC)


def iso_timestamp(value: datetime) -> str:
    """Format a datetime as ISO-8601 with millisecond precision and a Z suffix.

    Example: 2025-01-01T12:00:00.000Z
    """
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
