"""Validation result models returned by every validator."""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel

from natid.core.exceptions import ErrorKind, ValidationError


class ValidResult(BaseModel):
    """Successful validation of a compacted number."""

    is_valid: Literal[True] = True
    compact: str
    is_individual: bool = True
    is_company: bool = False


class InvalidResult(BaseModel):
    """Failed validation, tagged with a machine-distinguishable error kind."""

    is_valid: Literal[False] = False
    error: ErrorKind
    message: str = ""

    @classmethod
    def from_error(cls, error: ValidationError) -> InvalidResult:
        return cls(error=error.kind, message=error.message)


ValidateReturn = Union[ValidResult, InvalidResult]


class ValidatorInfo(BaseModel):
    """Descriptive metadata of a registered validator."""

    key: str
    name: str
    local_name: str
    abbreviation: str
