"""Injectable time sources behind the IClock Protocol."""

from __future__ import annotations

from natid.clock.fixed_clock import FixedClock
from natid.clock.system_clock import SystemClock
from natid.core.config import AppSettings
from natid.core.protocols import IClock


def create_clock(settings: AppSettings | None = None) -> IClock:
    """Create the clock selected by application settings.

    Returns a FixedClock when ``NATID_CLOCK_FIXED_NOW`` is set, else a SystemClock.
    """
    if settings is None:
        settings = AppSettings()

    if settings.clock.fixed_now is not None:
        return FixedClock(settings.clock.fixed_now)
    return SystemClock()


__all__ = ["FixedClock", "SystemClock", "create_clock"]
