"""Logger preparation shared by the service entry points."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def prepare_logger(logger_name: str, level: str | int = logging.INFO) -> logging.Logger:
    """Attach a stream handler to *logger_name* once and set its level."""
    logger = logging.getLogger(logger_name)
    if not any(getattr(h, "_natid_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
        handler._natid_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
