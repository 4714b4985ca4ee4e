"""Shared test doubles — re-export the pinned clock."""

from __future__ import annotations

from natid.clock.fixed_clock import FixedClock

__all__ = ["FixedClock"]
