"""
hex0 byte decoder.

Turns a unit source into output bytes, one byte per call:

    ┌────────────┐  unit   ┌──────────┐  kind   ┌─────────────────────┐
    │   Source   │───────>│ classify │───────>│ pending-nibble state │──> byte
    └────────────┘         └──────────┘         └─────────────────────┘

  NIBBLE   first digit -> high nibble, second digit -> return the byte
  COMMENT  skip through the next line break
  FILLER   ignored (whitespace, labels, addresses, punctuation)
  WIDE     ignored (non-ASCII; never part of hex0)

The pending-nibble state lives inside one decode_next_byte() call, so a
decoder never carries a half-built byte between calls.
"""

from __future__ import annotations
import logging
from typing import Iterator, Optional

from .errors import Hex0Error, TruncatedByteError, UnterminatedCommentError
from .lexer import UnitKind, classify
from .source import open_source

__all__ = ['Hex0Decoder', 'decode_next_byte']

log = logging.getLogger(__name__)


class Hex0Decoder:
    """One decode session over one source.

    Args:
        source: a ByteSource/TextSource, or anything open_source() accepts.
        lenient_eof: treat a comment cut off by end of input as a clean
            end instead of raising UnterminatedCommentError.
    """

    def __init__(self, source, *, lenient_eof: bool = False):
        self.source = open_source(source)
        self.lenient_eof = lenient_eof
        self.bytes_decoded = 0
        self.comments_skipped = 0
        self.error: Optional[Hex0Error] = None

    def decode_next_byte(self) -> Optional[int]:
        """Decode the next output byte.

        Returns the byte value, or None when the input ended cleanly.
        Raises TruncatedByteError if input ends after a single digit and
        UnterminatedCommentError if it ends inside a comment. Once raised,
        the same error is raised again by every later call.
        """
        if self.error is not None:
            raise self.error
        try:
            return self._decode()
        except Hex0Error as e:
            self.error = e
            raise

    def _decode(self) -> Optional[int]:
        source = self.source
        pending = 0
        value = 0
        digit_line = digit_offset = 0
        while True:
            unit = source.read_unit()
            if unit is None:
                if pending:
                    raise TruncatedByteError(
                        "input ended in the middle of a byte",
                        digit_line, digit_offset)
                return None

            kind, nibble = classify(unit)
            if kind is UnitKind.NIBBLE:
                if not pending:
                    value = nibble << 4
                    pending = 1
                    digit_line = source.line
                    digit_offset = source.offset - 1
                    continue
                self.bytes_decoded += 1
                return value | nibble

            if kind is UnitKind.COMMENT:
                comment_line = source.line
                try:
                    source.skip_line()
                except UnterminatedCommentError:
                    if not self.lenient_eof:
                        raise
                    log.debug("Unterminated comment at end of input ignored (%r)", source)
                    return None
                self.comments_skipped += 1
                log.debug("Skipped comment on line %d", comment_line)
            # FILLER and WIDE units are dropped

    def __iter__(self) -> Iterator[int]:
        while True:
            b = self.decode_next_byte()
            if b is None:
                return
            yield b

    def __repr__(self):
        return (f"Hex0Decoder({self.source!r}, bytes={self.bytes_decoded}, "
                f"comments={self.comments_skipped})")


def decode_next_byte(source) -> Optional[int]:
    """Decode a single byte from ``source`` (see Hex0Decoder.decode_next_byte)."""
    return Hex0Decoder(source).decode_next_byte()
