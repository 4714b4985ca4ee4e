"""Protocol interfaces for natid abstractions.

Validators and clocks are consumed through these Protocols: structural typing,
no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from natid.models.result import ValidateReturn


# ---------------------------------------------------------------------------
# Time source
# ---------------------------------------------------------------------------

@runtime_checkable
class IClock(Protocol):
    """Source of the current time (timezone-aware, UTC)."""

    def now(self) -> datetime: ...


# ---------------------------------------------------------------------------
# Identifier validator
# ---------------------------------------------------------------------------

@runtime_checkable
class IValidator(Protocol):
    """Uniform contract every identifier validator implements."""

    name: str
    local_name: str
    abbreviation: str

    def compact(self, number: str) -> str: ...

    def format(self, number: str) -> str: ...

    def validate(self, number: str) -> ValidateReturn: ...
