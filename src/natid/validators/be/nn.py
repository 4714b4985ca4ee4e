"""NN, NISS (Belgian national number).

The national number is a unique identifier of Belgian residents. It consists
of 11 digits: a ``YYMMDD`` date of birth, a 3-digit serial and a 2-digit
modulo-97 check number. For people born in 2000 or later the check number is
computed over the first nine digits prefixed with ``2``.

When the date of birth is unknown the month is encoded as ``00``; the year
still takes part in the check number calculation.

More information:
https://fr.wikipedia.org/wiki/Numéro_de_registre_national

>>> compact('85.07.30-033.28')
'85073003328'
>>> validate('85 07 30 033 28').is_valid
True
>>> validate('17 07 30 033 84').is_valid  # born in 2017
True
>>> validate('85 07 30 033 29').error
<ErrorKind.INVALID_CHECKSUM: 'InvalidChecksum'>
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone

from natid.core.exceptions import (
    CleaningError,
    InvalidChecksum,
    InvalidFormat,
    InvalidLength,
    ValidationError,
)
from natid.core.types import ChecksumBasis
from natid.models.result import InvalidResult, ValidateReturn, ValidResult
from natid.util.dates import parse_date_compact_yyyymmdd
from natid.util.strings import isdigits, split_at
from natid.validators.base import BaseValidator

logger = logging.getLogger(__name__)

LENGTH = 11
UNKNOWN_MONTH = "00"


def _date_fields(number: str) -> tuple[str, str, str]:
    yy, mm, dd, _ = split_at(number, 2, 4, 6)
    return yy, mm, dd


def _full_years(yy: str) -> list[int]:
    return [int(f"19{yy}"), int(f"20{yy}")]


def _base_number(number: str) -> str:
    return split_at(number, 9)[0]


def _checksum(number: str) -> int:
    return int(split_at(number, 9)[1])


def _to_checksum_basis(year: int, base_number: str) -> ChecksumBasis:
    return int(base_number if year < 2000 else f"2{base_number}")


def is_unknown_dob(number: str) -> bool:
    """True if the date block uses the ``00`` month sentinel."""
    yy, mm, dd = _date_fields(number)
    return isdigits(yy) and mm == UNKNOWN_MONTH and isdigits(dd)


class BelgianNationalNumber(BaseValidator):
    """Validator for the Belgian national number (NN, NISS)."""

    name = "Belgian National Number"
    local_name = "Numéro National"
    abbreviation = "NN, NISS"

    DELETE_CHARS = " -."

    def validate(self, number: str) -> ValidateReturn:
        try:
            number = self.compact(number)
        except CleaningError as exc:
            logger.debug("Rejected national number: %s", exc.kind)
            return InvalidResult.from_error(exc)

        if not isdigits(number) or not number.strip("0"):
            return self._reject(InvalidFormat(), number)

        if len(number) != LENGTH:
            return self._reject(InvalidLength(), number)

        if not self._valid_structure(number):
            error = InvalidFormat("The date of birth is not a valid past date.")
            return self._reject(error, number)

        if not self._valid_checksum(number):
            return self._reject(InvalidChecksum(), number)

        return ValidResult(compact=number)

    def checksum_bases(self, number: str) -> list[ChecksumBasis]:
        """Every basis the check number may have been computed over.

        One per plausible birth year: the two-digit year is ambiguous between
        the 19xx and 20xx centuries, and future years are excluded.
        """
        base_number = _base_number(number)
        if is_unknown_dob(number):
            yy, _, _ = _date_fields(number)
            years = [year for year in _full_years(yy) if self._is_in_past(date(year, 1, 1))]
        else:
            years = [dob.year for dob in self.valid_past_dates(number)]
        return [_to_checksum_basis(year, base_number) for year in years]

    def valid_past_dates(self, number: str) -> list[date]:
        """Calendar-valid, non-future birth dates the first six digits may encode."""
        yy, mm, dd = _date_fields(number)
        dates = []
        for year in _full_years(yy):
            dob = parse_date_compact_yyyymmdd(f"{year}{mm}{dd}")
            if dob is not None and self._is_in_past(dob):
                dates.append(dob)
        return dates

    def _valid_structure(self, number: str) -> bool:
        return is_unknown_dob(number) or bool(self.valid_past_dates(number))

    def _valid_checksum(self, number: str) -> bool:
        checksum = _checksum(number)
        return any(basis % 97 + checksum == 97 for basis in self.checksum_bases(number))

    def _is_in_past(self, day: date) -> bool:
        cutoff = self._clock.now() + timedelta(hours=self._settings.future_tolerance_hours)
        return datetime(day.year, day.month, day.day, tzinfo=timezone.utc) < cutoff

    @staticmethod
    def _reject(error: ValidationError, number: str) -> InvalidResult:
        logger.debug("Rejected national number of length %d: %s", len(number), error.kind)
        return InvalidResult.from_error(error)


_validator = BelgianNationalNumber()

name = _validator.name
local_name = _validator.local_name
abbreviation = _validator.abbreviation
compact = _validator.compact
format = _validator.format
validate = _validator.validate
is_valid = _validator.is_valid
