"""Errors raised when a string cannot be quoted for the shell."""

from __future__ import annotations


class QuoteError(ValueError):
    """A string holds a character no quoting style can carry."""

    kind = "invalid"
    description = "invalid character"

    def __init__(self, char: str):
        self.char = char
        self.codepoint = ord(char)
        super().__init__(f"string contains {self.description} U+{self.codepoint:04X}")


class NonASCIIError(QuoteError):
    """Code point 128 or above."""

    kind = "non_ascii"
    description = "non-ASCII character"


class ControlCharacterError(QuoteError):
    """C0 control character or DEL."""

    kind = "control"
    description = "control character"
