"""
Retention Module

Pure helpers deciding whether a stored transaction is past the retention window.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from domain.entities import TransactionRecord


def compute_cutoff(now: datetime, retention_window: timedelta) -> datetime:
    """Instant before which records are expired. Naive `now` is taken as UTC."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now - retention_window


def parse_timestamp(value) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp as stored on a record.

    Accepts a trailing "Z". Naive values are taken as UTC.
    Returns None for missing, non-string, or malformed values.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def is_expired(record: TransactionRecord, cutoff: datetime) -> Optional[bool]:
    """
    True if the record is older than cutoff, False if not,
    None if its timestamp cannot be used.
    """
    created_at = parse_timestamp(getattr(record, "timestamp", None))
    if created_at is None:
        return None
    return created_at < cutoff
