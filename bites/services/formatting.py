"""Display helpers for item listings."""
from __future__ import annotations

from datetime import datetime, timezone


def _now() -> datetime:
    return datetime.now(timezone.utc)


def format_time_ago(created_at: datetime, *, now: datetime | None = None) -> str:
    """Compact age label: minutes under an hour, hours under a day, then days."""

    reference = now or _now()
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=timezone.utc)

    seconds = max(0, int((reference - created_at).total_seconds()))
    if seconds < 3600:
        return f"{seconds // 60}m"
    if seconds < 86400:
        return f"{seconds // 3600}h"
    return f"{seconds // 86400}d"


__all__ = ["format_time_ago"]
