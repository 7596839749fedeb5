"""Quoting engine: pick the cheapest safe shell quoting style for a string.

Styles are tried in order plain, single quotes, double quotes. Plain adds
nothing; single quotes need no escaping inside; double quotes are the last
resort because $ " \\ and ` must be backslash-escaped.
"""

from __future__ import annotations

import io
from collections.abc import Iterable
from typing import IO

from shellquote.core.charmask import ALL_STYLES, CHAR_MASK, ESCAPE, PLAIN, SINGLE
from shellquote.core.errors import ControlCharacterError, NonASCIIError
from shellquote.core.log import log_rejection

EMPTY_ARG = "''"


def classify(s: str) -> int:
    """Return the mask of quoting styles safe for every character in s.

    Raises NonASCIIError or ControlCharacterError for the first character,
    left to right, that no style can carry. The empty string gets every
    style; callers handle it separately.
    """
    mask = ALL_STYLES
    for c in s:
        cp = ord(c)
        if cp >= 128:
            log_rejection(NonASCIIError.kind, cp)
            raise NonASCIIError(c)
        cm = CHAR_MASK[cp]
        if not cm:
            log_rejection(ControlCharacterError.kind, cp)
            raise ControlCharacterError(c)
        mask &= cm
    return mask


def _write_escaped(out: IO[str], s: str) -> None:
    """Write s with a backslash before each character special inside "..."."""
    for c in s:
        if CHAR_MASK[ord(c)] & ESCAPE:
            out.write("\\")
        out.write(c)


# === Returning text ===


def quote(s: str) -> str:
    """Quote a string so the shell reads it back as one literal argument."""
    if not s:
        return EMPTY_ARG
    mask = classify(s)
    if mask & PLAIN:
        return s
    if mask & SINGLE:
        return "'" + s + "'"
    buf = io.StringIO()
    buf.write('"')
    _write_escaped(buf, s)
    buf.write('"')
    return buf.getvalue()


def quote_bare(s: str) -> str:
    """Quote a string for use between double quotes the caller supplies.

    The quotes themselves are not included, so an empty string stays empty.
    """
    if classify(s) & PLAIN:
        return s
    buf = io.StringIO()
    _write_escaped(buf, s)
    return buf.getvalue()


def quote_command(args: Iterable[str]) -> str:
    """Quote each argument and join them into one command line."""
    buf = io.StringIO()
    write_command(buf, args)
    return buf.getvalue()


# === Writing to a buffer ===
# out is a text sink with write(str), e.g. io.StringIO or a file opened in
# text mode. Byte sinks (bytearray, io.BytesIO) are not supported. On error,
# text already written stays in out; discard the whole buffer.


def write_quoted(out: IO[str], s: str) -> None:
    """Write the quoted form of s to out, a text sink such as io.StringIO."""
    if not s:
        out.write(EMPTY_ARG)
        return
    mask = classify(s)
    if mask & PLAIN:
        out.write(s)
    elif mask & SINGLE:
        out.write("'")
        out.write(s)
        out.write("'")
    else:
        out.write('"')
        _write_escaped(out, s)
        out.write('"')


def write_bare(out: IO[str], s: str) -> None:
    """Write s to out escaped for use inside double quotes, without the quotes."""
    if classify(s) & PLAIN:
        out.write(s)
    else:
        _write_escaped(out, s)


def write_command(out: IO[str], args: Iterable[str]) -> None:
    """Write a space-separated, quoted command line to out.

    out must accept str; pass io.StringIO, not io.BytesIO. Stops at the first
    argument that cannot be quoted.
    """
    for i, arg in enumerate(args):
        if i > 0:
            out.write(" ")
        write_quoted(out, arg)
