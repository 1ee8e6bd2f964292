"""Clock helpers for session bookkeeping."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def idle_cutoff(idle_timeout: timedelta, now: Optional[datetime] = None) -> datetime:
    """Oldest last-seen time a session may have and still count as active."""
    return (now or utcnow()) - idle_timeout


__all__ = ["idle_cutoff", "utcnow"]
