"""Wall-clock time source implementing IClock."""

from __future__ import annotations

from datetime import datetime, timezone


class SystemClock:
    """Production IClock backed by the system clock."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
