"""Type aliases used across natid."""

from __future__ import annotations

from natid.core.exceptions import CleaningError

RawNumber = str
CompactNumber = str
ValidatorKey = str
ChecksumBasis = int
CleanResult = tuple[str, CleaningError | None]
