"""
Stream compiler: drives the decoder and writes each byte to a sink.

Output already written before a failure is left in place; nothing is
retried or rolled back.
"""

from __future__ import annotations
import io
import logging
import sys
from contextlib import ExitStack
from typing import Optional

from .decoder import Hex0Decoder
from .errors import Hex0FileError
from .source import ByteSource

__all__ = ['compile_stream', 'compile_source', 'compile_file']

log = logging.getLogger(__name__)


def compile_stream(source, sink, *, lenient_eof: bool = False) -> int:
    """Decode ``source`` into ``sink`` until clean end of input.

    Args:
        source: a unit source, stream, bytes or str (see open_source()).
        sink: any object with ``write(bytes)``; flushed on every exit path
            if it has ``flush()``.
        lenient_eof: accept a final comment without a line break.

    Returns:
        Number of bytes written.
    """
    decoder = Hex0Decoder(source, lenient_eof=lenient_eof)
    write = sink.write
    try:
        for b in decoder:
            write(bytes((b,)))
    finally:
        flush = getattr(sink, 'flush', None)
        if flush is not None:
            flush()
    log.debug("%r finished", decoder)
    return decoder.bytes_decoded


def compile_source(data, *, lenient_eof: bool = False) -> bytes:
    """Compile in-memory hex0 (bytes or str) to raw binary."""
    out = io.BytesIO()
    compile_stream(data, out, lenient_eof=lenient_eof)
    return out.getvalue()


def compile_file(input_path: Optional[str], output_path: Optional[str], *,
                 lenient_eof: bool = False) -> int:
    """Compile a hex0 file into a binary file.

    ``None`` (or ``"-"``) selects stdin / stdout. The output file is
    created or truncated. Returns the number of bytes written.
    """
    with ExitStack() as stack:
        if input_path in (None, '-'):
            fin = sys.stdin.buffer
        else:
            try:
                fin = stack.enter_context(open(input_path, 'rb'))
            except OSError as e:
                raise Hex0FileError(f"failed to open input file {input_path}: {e}",
                                    input_path) from e

        if output_path in (None, '-'):
            fout = sys.stdout.buffer
        else:
            try:
                fout = stack.enter_context(open(output_path, 'wb'))
            except OSError as e:
                raise Hex0FileError(f"failed to create output file {output_path}: {e}",
                                    output_path) from e

        count = compile_stream(ByteSource(fin), fout, lenient_eof=lenient_eof)
        log.info("Wrote %d bytes to %s", count, output_path or '<stdout>')
        return count
