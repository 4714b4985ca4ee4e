"""Pinned time source for tests and reproducible runs."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone


class FixedClock:
    """IClock that always reports the same instant (naive values are taken as UTC)."""

    def __init__(self, now: datetime) -> None:
        self._now = now if now.tzinfo else now.replace(tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self._now

    def advance(self, delta: timedelta) -> None:
        """Move the pinned instant forward by *delta*."""
        self._now += delta
