from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional


def to_utc_naive(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Canonical in-memory form for timestamps: UTC, tzinfo stripped, whole seconds.

    Aware values are converted to UTC first; naive values are taken as UTC.
    Everything the store holds goes through here, so a value read back from
    storage compares equal to the one that was written.
    """
    if dt is None:
        return None
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt.replace(microsecond=0)


def utcnow() -> datetime:
    return to_utc_naive(datetime.now(timezone.utc))


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse "YYYY-MM-DDTHH:MM[:SS]" with optional "Z" or offset. Blank -> None."""
    text = (value or "").strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = f"{text[:-1]}+00:00"
    return to_utc_naive(datetime.fromisoformat(text))


def parse_iso_date(value: Optional[str]) -> Optional[date]:
    """Parse "YYYY-MM-DD"; a full timestamp is reduced to its UTC date."""
    text = (value or "").strip()
    if not text:
        return None
    if "T" in text:
        return parse_iso_datetime(text).date()
    return date.fromisoformat(text)


def to_utc_z(dt: Optional[datetime]) -> Optional[str]:
    """ISO-8601 at second precision with a trailing "Z"."""
    normalized = to_utc_naive(dt)
    if normalized is None:
        return None
    return f"{normalized.isoformat()}Z"
