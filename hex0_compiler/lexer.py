"""
Unit classification for hex0 source.

hex0 has exactly three kinds of meaningful input: hex digits, the two
comment markers, and the line break that ends a comment. Everything else
is filler. Units wider than one ASCII unit (non-ASCII code points, or raw
bytes with the high bit set) can never be part of the grammar and are
reported separately so sources of either flavour classify the same way.
"""

from __future__ import annotations
import enum
from typing import Dict, Optional, Tuple, Union

__all__ = ['UnitKind', 'decode_nibble', 'is_comment_start', 'classify',
           'COMMENT_SEMICOLON', 'COMMENT_HASH', 'LINE_BREAK']


# ──────────────────────────────────────────────
# Tokens
# ──────────────────────────────────────────────

COMMENT_SEMICOLON = ';'
COMMENT_HASH = '#'
LINE_BREAK = '\n'

ASCII_LIMIT = 0x80

Unit = Union[str, int]


class UnitKind(enum.Enum):
    NIBBLE = "NIBBLE"
    COMMENT = "COMMENT"
    FILLER = "FILLER"
    WIDE = "WIDE"


# ──────────────────────────────────────────────
# Nibble table (keyed by code point)
# ──────────────────────────────────────────────

NIBBLES: Dict[int, int] = {}
for _value, _digit in enumerate("0123456789abcdef"):
    NIBBLES[ord(_digit)] = _value
    NIBBLES[ord(_digit.upper())] = _value
del _value, _digit

COMMENT_CODES = frozenset((ord(COMMENT_SEMICOLON), ord(COMMENT_HASH)))


def _code(c: Unit) -> int:
    if isinstance(c, int):
        return c
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return ord(c)


def decode_nibble(c: Unit) -> Optional[int]:
    """Value 0-15 of a hex digit (either case), or None."""
    return NIBBLES.get(_code(c))


def is_comment_start(c: Unit) -> bool:
    return _code(c) in COMMENT_CODES


def classify(c: Unit) -> Tuple[UnitKind, Optional[int]]:
    """Classify one unit; the nibble value is set only for NIBBLE."""
    if _code(c) >= ASCII_LIMIT:
        return UnitKind.WIDE, None
    if is_comment_start(c):
        return UnitKind.COMMENT, None
    nibble = decode_nibble(c)
    if nibble is not None:
        return UnitKind.NIBBLE, nibble
    return UnitKind.FILLER, None
