"""
Exception types for the hex0 compiler.

Clean end of input is not an error: ``Hex0Decoder.decode_next_byte()``
returns ``None`` for it. Everything here is a hard stop for the current run.
Plain I/O failures from the underlying streams propagate as ``OSError``.
"""

from __future__ import annotations
from typing import Optional

__all__ = ['Hex0Error', 'TruncatedByteError', 'UnterminatedCommentError',
           'Hex0FileError']


class Hex0Error(Exception):
    """Base class for hex0 compile errors."""
    def __init__(self, message: str, line: int = 0, offset: Optional[int] = None):
        self.message = message
        self.line = line
        self.offset = offset
        super().__init__(f"Line {line}: {message}" if line else message)


class TruncatedByteError(Hex0Error, EOFError):
    """Input ended after the first hex digit of a byte."""


class UnterminatedCommentError(Hex0Error, EOFError):
    """Input ended inside a comment, before its line break."""


class Hex0FileError(Hex0Error):
    """An input or output file could not be opened."""
    def __init__(self, message: str, path: str):
        self.path = path
        super().__init__(message)
