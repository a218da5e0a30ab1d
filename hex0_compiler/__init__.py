"""
hex0 compiler
=============
Compiles hex0 ("boot0") bootstrap source into raw binary.

hex0 is the smallest useful notation for hand-written machine code:

    ; ELF magic
    7F 45 4C 46     # \\x7fELF
    :label 01 02    ; labels and addresses are just ignored text

Each pair of hex digits becomes one output byte (high nibble first),
``;`` and ``#`` start comments that run to the end of the line, and every
other character is filler.

Architecture:
    ┌────────────┐    ┌──────────┐    ┌──────────┐    ┌────────────┐
    │ hex0 input │───>│  Source  │───>│ Decoder  │───>│  Compiler  │──> binary
    │ (bytes/str)│    │ (units)  │    │ (bytes)  │    │ (sink I/O) │
    └────────────┘    └──────────┘    └──────────┘    └────────────┘

    - lexer.py:    nibble lookup, comment markers, unit classification
    - source.py:   chunked byte/text sources with comment skipping
    - decoder.py:  per-byte state machine
    - compiler.py: driving loop and file helpers
    - encoder.py:  binary -> canonical hex0 text
"""

__version__ = "0.1.0"

from .errors import Hex0Error, TruncatedByteError, UnterminatedCommentError, Hex0FileError
from .lexer import UnitKind, classify, decode_nibble, is_comment_start
from .source import ByteSource, TextSource, open_source
from .decoder import Hex0Decoder, decode_next_byte
from .compiler import compile_stream, compile_source, compile_file
from .encoder import encode_bytes
