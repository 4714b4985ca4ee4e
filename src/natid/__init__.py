"""natid: validation and normalization of national identification numbers."""

from __future__ import annotations

from natid.core.exceptions import (
    CleaningError,
    ErrorKind,
    InvalidChecksum,
    InvalidFormat,
    InvalidLength,
    NatIdError,
    ValidationError,
)
from natid.models.result import InvalidResult, ValidResult
from natid.validators import ValidatorRegistry, create_registry

__all__ = [
    "CleaningError",
    "ErrorKind",
    "InvalidChecksum",
    "InvalidFormat",
    "InvalidLength",
    "InvalidResult",
    "NatIdError",
    "ValidResult",
    "ValidationError",
    "ValidatorRegistry",
    "create_registry",
]
