"""Validators for Belgian identifiers."""

from __future__ import annotations

from natid.validators.be.nn import BelgianNationalNumber

__all__ = ["BelgianNationalNumber"]
