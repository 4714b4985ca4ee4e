"""Base validator with common dependency wiring and the clean/compact/format trio."""

from __future__ import annotations

from abc import ABC, abstractmethod

from natid.clock import SystemClock
from natid.core.config import AppSettings, ValidationConfig
from natid.core.protocols import IClock
from natid.core.types import CleanResult
from natid.models.result import ValidateReturn
from natid.util.strings import clean_unicode


class BaseValidator(ABC):
    """Common base for identifier validators.

    Subclasses set the metadata attributes and ``DELETE_CHARS`` and implement
    :meth:`validate`. The clock and validation settings are injected at
    construction time so date checks can be pinned in tests.
    """

    name: str = ""
    local_name: str = ""
    abbreviation: str = ""

    # Separators removed by clean()
    DELETE_CHARS = " "

    def __init__(
        self,
        *,
        clock: IClock | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        self._clock = clock or SystemClock()
        self._settings: ValidationConfig = (settings or AppSettings()).validation

    def clean(self, number: str) -> CleanResult:
        """Strip separators; returns ``(value, error)`` instead of raising."""
        return clean_unicode(number, self.DELETE_CHARS)

    def compact(self, number: str) -> str:
        """Convert the number to its minimal representation.

        Raises CleaningError when the input cannot be cleaned.
        """
        value, err = self.clean(number)
        if err is not None:
            raise err
        return value

    def format(self, number: str) -> str:
        """Best-effort formatting; cleaning errors are discarded."""
        value, _ = self.clean(number)
        return value

    @abstractmethod
    def validate(self, number: str) -> ValidateReturn:
        """Run every validation stage; never raises for string input."""

    def is_valid(self, number: str) -> bool:
        """Shorthand for ``validate(number).is_valid``."""
        return self.validate(number).is_valid
