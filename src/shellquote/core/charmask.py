"""Per-character classification table for POSIX shell quoting.

Each byte 0-127 maps to the set of quoting styles it is safe under. See
"Shell Command Language", section 2.2 (Quoting):
https://pubs.opengroup.org/onlinepubs/9699919799/utilities/V3_chap02.html
"""

from __future__ import annotations

# === Style flags ===

PLAIN = 1 << 0  # safe with no quotes at all
SINGLE = 1 << 1  # safe between '...'
DOUBLE = 1 << 2  # safe between "..."
ESCAPE = 1 << 3  # needs a backslash between "..."

ALL_STYLES = PLAIN | SINGLE | DOUBLE

# Punctuation that never needs quoting
PLAIN_SAFE = frozenset("%+,-./:=@_")

# Still special between double quotes
DOUBLE_ESCAPED = frozenset('$"\\`')


def _build_char_mask() -> tuple[int, ...]:
    table = [0] * 128
    for c in range(32, 127):
        table[c] = SINGLE | DOUBLE
    for lo, hi in (("A", "Z"), ("a", "z"), ("0", "9")):
        for c in range(ord(lo), ord(hi) + 1):
            table[c] = ALL_STYLES
    for ch in PLAIN_SAFE:
        table[ord(ch)] = ALL_STYLES
    # No way to put ' inside '...'
    table[ord("'")] = DOUBLE
    for ch in DOUBLE_ESCAPED:
        table[ord(ch)] = SINGLE | DOUBLE | ESCAPE
    return tuple(table)


CHAR_MASK: tuple[int, ...] = _build_char_mask()


def char_mask(c: str) -> int:
    """Return the style flags for a single character, 0 if it is never safe."""
    cp = ord(c)
    if cp >= len(CHAR_MASK):
        return 0
    return CHAR_MASK[cp]


def needs_escape(c: str) -> bool:
    """True if c must be backslash-escaped inside double quotes."""
    return bool(char_mask(c) & ESCAPE)
