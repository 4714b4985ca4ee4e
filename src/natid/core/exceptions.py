"""natid exception hierarchy."""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    INVALID_FORMAT = "InvalidFormat"
    INVALID_LENGTH = "InvalidLength"
    INVALID_CHECKSUM = "InvalidChecksum"
    CLEANING_ERROR = "CleaningError"


class NatIdError(Exception):
    """Base exception for all natid errors."""


class ValidationError(NatIdError):
    """A number failed one of the validation stages."""

    kind: ErrorKind
    default_message = "The number is not valid."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidFormat(ValidationError):
    """Unexpected characters, non-positive value or impossible date block."""

    kind = ErrorKind.INVALID_FORMAT
    default_message = "The number has an invalid format."


class InvalidLength(ValidationError):
    """The compacted number does not have the expected length."""

    kind = ErrorKind.INVALID_LENGTH
    default_message = "The number has an invalid length."


class InvalidChecksum(ValidationError):
    """The number's check digits do not match."""

    kind = ErrorKind.INVALID_CHECKSUM
    default_message = "The number's checksum or check digit is invalid."


class CleaningError(InvalidFormat):
    """Normalization could not produce a clean ASCII string."""

    kind = ErrorKind.CLEANING_ERROR
    default_message = "The number contains characters that cannot be cleaned."


class RegistryError(NatIdError):
    """Error while registering or looking up a validator."""


class ValidatorNotFoundError(RegistryError):
    """No validator registered under the requested key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"No validator registered for key={key!r}")


class DuplicateValidatorError(RegistryError):
    """A validator is already registered under the key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Validator already registered for key={key!r}")
