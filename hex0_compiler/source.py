"""
Pull-based unit sources for the hex0 decoder.

A source hands out one unit at a time and can skip the rest of a comment
line. ``ByteSource`` works on binary streams (units are ints), and
``TextSource`` on text streams (units are one-character strings). Both read
the underlying stream in chunks and never rewind it.
"""

from __future__ import annotations
import io
from typing import Optional, Union

from .errors import UnterminatedCommentError
from .lexer import LINE_BREAK

__all__ = ['ByteSource', 'TextSource', 'open_source', 'CHUNK_SIZE']

CHUNK_SIZE = 64 * 1024


class _ChunkedSource:
    """Shared buffering for byte and text sources."""

    _newline: Union[bytes, str]
    _newline_unit: Union[int, str]

    def __init__(self, stream, chunk_size: int = CHUNK_SIZE):
        self.stream = stream
        self.chunk_size = chunk_size
        self.offset = 0           # units consumed so far
        self.line = 1             # 1-based line of the next unit
        self._buf = self._newline[:0]
        self._pos = 0
        self._eof = False

    def _fill(self) -> bool:
        """Refill the buffer; False once the stream is exhausted."""
        if self._eof:
            return False
        chunk = self.stream.read(self.chunk_size)
        if not chunk:
            self._eof = True
            return False
        self._buf = chunk
        self._pos = 0
        return True

    def read_unit(self) -> Optional[Union[int, str]]:
        """Next unit, or None at end of input."""
        if self._pos >= len(self._buf) and not self._fill():
            return None
        unit = self._buf[self._pos]
        self._pos += 1
        self.offset += 1
        if unit == self._newline_unit:
            self.line += 1
        return unit

    def skip_line(self) -> None:
        """Consume everything through the next line break.

        Raises UnterminatedCommentError if the input ends first.
        """
        start_line = self.line
        while True:
            if self._pos >= len(self._buf) and not self._fill():
                raise UnterminatedCommentError(
                    "comment not terminated before end of input",
                    start_line, self.offset)
            end = self._buf.find(self._newline, self._pos)
            if end < 0:
                self.offset += len(self._buf) - self._pos
                self._pos = len(self._buf)
                continue
            self.offset += end + 1 - self._pos
            self._pos = end + 1
            self.line += 1
            return

    def __repr__(self):
        return f"{type(self).__name__}(line={self.line}, offset={self.offset})"


class ByteSource(_ChunkedSource):
    """Source over a binary stream; each unit is a byte value."""
    _newline = LINE_BREAK.encode('ascii')
    _newline_unit = ord(LINE_BREAK)


class TextSource(_ChunkedSource):
    """Source over a text stream; each unit is a single code point."""
    _newline = LINE_BREAK
    _newline_unit = LINE_BREAK


def open_source(obj) -> _ChunkedSource:
    """Wrap in-memory data or a stream in the matching source type."""
    if isinstance(obj, _ChunkedSource):
        return obj
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return ByteSource(io.BytesIO(bytes(obj)))
    if isinstance(obj, str):
        return TextSource(io.StringIO(obj))
    if isinstance(obj, io.TextIOBase):
        return TextSource(obj)
    if hasattr(obj, 'read'):
        return _sniff_source(obj)
    raise TypeError(f"cannot read hex0 source from {type(obj).__name__}")


def _sniff_source(stream) -> _ChunkedSource:
    """Pick the source type from the first chunk a generic stream returns.

    Covers readers that do not subclass io.TextIOBase, such as
    codecs.open() or a text-mode SpooledTemporaryFile.
    """
    chunk = stream.read(CHUNK_SIZE)
    cls = TextSource if isinstance(chunk, str) else ByteSource
    source = cls(stream)
    if chunk:
        source._buf = chunk
    else:
        source._eof = True
    return source
