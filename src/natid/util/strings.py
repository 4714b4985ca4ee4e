"""String helpers shared by all identifier validators."""

from __future__ import annotations

import unicodedata

from natid.core.exceptions import CleaningError
from natid.core.types import CleanResult

# Unicode look-alikes folded to their ASCII counterparts before cleaning.
_DASHES = "\u2010\u2011\u2012\u2013\u2014\u2015\u2212\ufe58\ufe63\uff0d"
_SPACES = "\u00a0\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a\u200b\u202f\u205f\u3000"
_TRANSLATION = str.maketrans({**{c: "-" for c in _DASHES}, **{c: " " for c in _SPACES}})


def clean_unicode(value: object, deletechars: str = " ") -> CleanResult:
    """Normalize *value* and strip *deletechars*.

    Returns a ``(value, error)`` pair. On failure the value holds whatever
    could be cleaned so far and the error is a :class:`CleaningError`.
    """
    if not isinstance(value, str):
        return "", CleaningError(f"Expected a string, got {type(value).__name__}")

    normalized = unicodedata.normalize("NFKC", value).translate(_TRANSLATION)
    cleaned = "".join(c for c in normalized if c not in deletechars)

    if not cleaned.isascii():
        return cleaned, CleaningError()
    return cleaned, None


def isdigits(value: str) -> bool:
    """True for a non-empty string of ASCII digits only."""
    return bool(value) and value.isascii() and value.isdigit()


def split_at(value: str, *points: int) -> list[str]:
    """Split *value* at the given offsets, e.g. ``split_at("abcdef", 2, 4)``."""
    parts: list[str] = []
    start = 0
    for point in points:
        parts.append(value[start:point])
        start = point
    parts.append(value[start:])
    return parts
