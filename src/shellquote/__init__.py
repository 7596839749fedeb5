"""
shellquote - Quote strings for the POSIX shell.

Picks the cheapest quoting that makes the shell see each string as a single
literal argument, and keeps local paths from being mistaken for flags or
remote files.
"""

from __future__ import annotations

__version__ = "0.1.0"

from shellquote.core.errors import ControlCharacterError, NonASCIIError, QuoteError
from shellquote.core.log import configure_logging
from shellquote.core.paths import local_path
from shellquote.core.quote import (
    classify,
    quote,
    quote_bare,
    quote_command,
    write_bare,
    write_command,
    write_quoted,
)

__all__ = [
    "ControlCharacterError",
    "NonASCIIError",
    "QuoteError",
    "__version__",
    "classify",
    "configure_logging",
    "local_path",
    "quote",
    "quote_bare",
    "quote_command",
    "write_bare",
    "write_command",
    "write_quoted",
]
