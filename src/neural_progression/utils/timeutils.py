"""Time helpers."""

from __future__ import annotations

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def parse_timestamp(value: str | None) -> datetime:
    """Parse an ISO-8601 timestamp, falling back to now for missing values.

    A trailing ``Z`` (as written by JavaScript's ``toISOString``) is accepted.
    """
    if not value:
        return utcnow()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def format_timestamp(value: datetime) -> str:
    """Format a datetime as ISO-8601 with a ``Z`` suffix for UTC."""
    return value.isoformat().replace("+00:00", "Z")
