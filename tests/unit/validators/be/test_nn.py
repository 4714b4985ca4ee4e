"""Tests for the Belgian national number validator."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import pytest

from natid.core.config import AppSettings, ValidationConfig
from natid.core.exceptions import CleaningError, ErrorKind, InvalidFormat
from natid.core.protocols import IValidator
from natid.models.result import InvalidResult, ValidResult
from natid.validators.be import nn
from natid.validators.be.nn import BelgianNationalNumber, is_unknown_dob
from tests.fakes import FixedClock

NOON_2024_06_01 = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    return FixedClock(NOON_2024_06_01)


@pytest.fixture
def validator(clock):
    return BelgianNationalNumber(clock=clock)


class TestMetadata:
    def test_names(self):
        assert nn.name == "Belgian National Number"
        assert nn.local_name == "Numéro National"
        assert nn.abbreviation == "NN, NISS"

    def test_satisfies_validator_protocol(self, validator):
        assert isinstance(validator, IValidator)


class TestCompact:
    def test_strips_separators(self, validator):
        assert validator.compact("85.03.15-123.69") == "85031512369"
        assert validator.compact(" 85 03 15 123 69 ") == "85031512369"

    def test_folds_unicode_dashes_and_fullwidth_digits(self, validator):
        assert validator.compact("85\u201303\u201315") == "850315"
        assert validator.compact("\uff18\uff15\uff10\uff13\uff11\uff15") == "850315"

    def test_raises_on_uncleanable_input(self, validator):
        with pytest.raises(CleaningError):
            validator.compact("85031512369é")

    def test_raises_on_non_string(self, validator):
        with pytest.raises(CleaningError):
            validator.compact(None)  # type: ignore[arg-type]


class TestFormat:
    def test_returns_cleaned_value(self, validator):
        assert validator.format("85.03.15-123.69") == "85031512369"

    def test_discards_cleaning_error(self, validator):
        assert validator.format("85031512369é") == "85031512369é"

    def test_compact_of_format_matches_compact(self, validator):
        for raw in ("85.03.15-123.69", "850015-12345", " 10 06 01 001 56"):
            assert validator.compact(validator.format(raw)) == validator.compact(raw)


class TestValidStandardDob:
    @pytest.mark.parametrize(
        "number",
        [
            "85031512369",  # 1985-03-15
            "85.03.15-123.69",
            "85 07 30 033 28",
            "17073003384",  # 2017-07-30, century-prefixed basis
            "10060100156",  # 2010-06-01
            "10060100127",  # 1910-06-01
        ],
    )
    def test_valid_numbers(self, validator, number):
        result = validator.validate(number)
        assert isinstance(result, ValidResult)
        assert result.is_valid is True
        assert result.is_individual is True
        assert result.is_company is False

    def test_result_holds_compact_form(self, validator):
        raw = "85.03.15-123.69"
        assert validator.validate(raw).compact == validator.compact(raw)

    def test_is_valid_shorthand(self, validator):
        assert validator.is_valid("85031512369") is True
        assert validator.is_valid("85031512345") is False


class TestUnknownDob:
    def test_sentinel_detected(self):
        assert is_unknown_dob("85001512348") is True
        assert is_unknown_dob("85031512369") is False

    def test_valid_with_20th_century_basis(self, validator):
        assert validator.validate("85001512348").is_valid is True

    def test_both_centuries_are_candidates(self, validator):
        assert validator.validate("20000100101").is_valid is True  # 1920
        assert validator.validate("20000100130").is_valid is True  # 2020

    def test_sentinel_passes_structure_but_checks_checksum(self, validator):
        result = validator.validate("850015-12345")
        assert result.error == ErrorKind.INVALID_CHECKSUM

    def test_future_year_excluded(self):
        v = BelgianNationalNumber(clock=FixedClock(datetime(2019, 6, 1, tzinfo=timezone.utc)))
        assert v.validate("20000100130").error == ErrorKind.INVALID_CHECKSUM
        assert v.validate("20000100101").is_valid is True


class TestInvalid:
    def test_checksum_mismatch(self, validator):
        result = validator.validate("85.03.15-123.45")
        assert isinstance(result, InvalidResult)
        assert result.is_valid is False
        assert result.error == ErrorKind.INVALID_CHECKSUM

    def test_february_30_never_valid(self, validator):
        assert validator.validate("850230-12345").error == ErrorKind.INVALID_FORMAT

    @pytest.mark.parametrize("number", ["85131512369", "85033212369", "85030012369"])
    def test_impossible_dates(self, validator, number):
        assert validator.validate(number).error == ErrorKind.INVALID_FORMAT

    @pytest.mark.parametrize("number", ["8503151236", "850315123690", "8503"])
    def test_wrong_length(self, validator, number):
        assert validator.validate(number).error == ErrorKind.INVALID_LENGTH

    @pytest.mark.parametrize("number", ["85031512A69", "", "00000000000", "-"])
    def test_not_digits_or_not_positive(self, validator, number):
        assert validator.validate(number).error == ErrorKind.INVALID_FORMAT

    def test_dob_in_future_for_both_centuries(self):
        v = BelgianNationalNumber(clock=FixedClock(datetime(1950, 1, 1, tzinfo=timezone.utc)))
        assert v.validate("85031512369").error == ErrorKind.INVALID_FORMAT

    def test_cleaning_error_is_returned_not_raised(self, validator):
        result = validator.validate("85031512369é")
        assert result.is_valid is False
        assert result.error == ErrorKind.CLEANING_ERROR
        assert issubclass(CleaningError, InvalidFormat)

    def test_message_is_populated(self, validator):
        assert validator.validate("8503").message

    def test_very_long_digit_string_reports_length(self, validator):
        assert validator.validate("1" * 5000).error == ErrorKind.INVALID_LENGTH

    def test_very_long_zero_string_reports_format(self, validator):
        assert validator.validate("0" * 5000).error == ErrorKind.INVALID_FORMAT


class TestFutureCutoff:
    def test_tomorrow_tolerated(self, validator):
        # 2024-06-02 is within one day of noon 2024-06-01
        assert validator.validate("24060200129").is_valid is True

    def test_day_after_tomorrow_only_matches_1924(self, validator):
        assert validator.validate("24060300167").is_valid is True
        assert validator.validate("24060300196").error == ErrorKind.INVALID_CHECKSUM

    def test_date_equal_to_cutoff_is_future(self):
        v = BelgianNationalNumber(clock=FixedClock(datetime(2024, 6, 1, tzinfo=timezone.utc)))
        assert v.validate("24060200129").error == ErrorKind.INVALID_CHECKSUM
        assert v.validate("24060200197").is_valid is True  # 1924 basis

    def test_tolerance_is_configurable(self, clock):
        settings = AppSettings(validation=ValidationConfig(future_tolerance_hours=0))
        v = BelgianNationalNumber(clock=clock, settings=settings)
        assert v.validate("24060200129").error == ErrorKind.INVALID_CHECKSUM


class TestChecksumBases:
    def test_single_century(self, validator):
        assert validator.checksum_bases("85031512369") == [850315123]

    def test_both_centuries(self, validator):
        assert validator.checksum_bases("10060100156") == [100601001, 2100601001]

    def test_unknown_dob(self, validator):
        assert validator.checksum_bases("20000100101") == [200001001, 2200001001]

    def test_valid_past_dates(self, validator):
        dates = validator.valid_past_dates("10060100156")
        assert [d.year for d in dates] == [1910, 2010]


class TestLogging:
    def test_rejection_logged_at_debug(self, validator, caplog, monkeypatch):
        # the service logger stops propagation once the API has prepared it
        monkeypatch.setattr(logging.getLogger("natid"), "propagate", True)
        caplog.set_level(logging.DEBUG, logger="natid.validators.be.nn")
        validator.validate("85031512345")
        assert "InvalidChecksum" in caplog.text
        assert "85031512345" not in caplog.text
