"""Opt-in JSON logging of rejected strings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO

import structlog

_logger: structlog.typing.FilteringBoundLogger | None = None
_log_file: IO[str] | None = None


def configure_logging(path: Path | None) -> None:
    """Log rejections as JSON lines to path. None turns logging off.

    The logger is private to this package; the host's structlog configuration
    is left alone. The log file stays open until the next call, so finish
    with configure_logging(None) to close it.
    """
    global _logger, _log_file
    if _log_file is not None:
        _log_file.close()
    _logger = None
    _log_file = None
    if path is None:
        return

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    _log_file = open(path, "a", encoding="utf-8")
    _logger = structlog.wrap_logger(
        structlog.PrintLogger(file=_log_file),
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
    )


def log_rejection(reason: str, codepoint: int) -> None:
    """Record a rejected character. No-op if logging not configured."""
    if _logger is None:
        return
    try:
        _logger.warning("quote_rejected", reason=reason, codepoint=codepoint)
    except Exception:
        pass  # Logging is optional - never hide the quoting error
