"""Registry of identifier validators behind the IValidator Protocol."""

from __future__ import annotations

from natid.clock import create_clock
from natid.core.config import AppSettings
from natid.core.exceptions import DuplicateValidatorError, ValidatorNotFoundError
from natid.core.protocols import IValidator
from natid.core.types import ValidatorKey
from natid.models.result import ValidatorInfo
from natid.validators.be.nn import BelgianNationalNumber


class ValidatorRegistry:
    """Validators keyed by ``<country>.<identifier>``, e.g. ``be.nn``."""

    def __init__(self) -> None:
        self._validators: dict[ValidatorKey, IValidator] = {}

    def register(self, key: ValidatorKey, validator: IValidator) -> None:
        if key in self._validators:
            raise DuplicateValidatorError(key)
        self._validators[key] = validator

    def get(self, key: ValidatorKey) -> IValidator:
        try:
            return self._validators[key]
        except KeyError:
            raise ValidatorNotFoundError(key) from None

    def keys(self) -> list[ValidatorKey]:
        return sorted(self._validators)

    def describe(self) -> list[ValidatorInfo]:
        """Metadata for every registered validator, sorted by key."""
        return [
            ValidatorInfo(
                key=key,
                name=v.name,
                local_name=v.local_name,
                abbreviation=v.abbreviation,
            )
            for key, v in sorted(self._validators.items())
        ]

    def __contains__(self, key: object) -> bool:
        return key in self._validators

    def __len__(self) -> int:
        return len(self._validators)


def create_registry(settings: AppSettings | None = None) -> ValidatorRegistry:
    """Create the default registry with validators wired to the configured clock."""
    if settings is None:
        settings = AppSettings()

    clock = create_clock(settings)
    registry = ValidatorRegistry()
    registry.register("be.nn", BelgianNationalNumber(clock=clock, settings=settings))
    return registry


__all__ = ["ValidatorRegistry", "create_registry"]
