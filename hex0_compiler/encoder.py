"""
Canonical hex0 emitter.

Writes two lowercase hex digits per byte, space separated. Comments and
labels are not reproduced, so encode(decode(text)) is not the original
text, but decode(encode(data)) is always ``data``.
"""

from __future__ import annotations
from typing import List


def encode_bytes(data, *, per_line: int = 16, uppercase: bool = False) -> str:
    """Render bytes as hex0 text.

    Args:
        data: bytes-like input.
        per_line: bytes per output line; 0 puts everything on one line.
        uppercase: use A-F instead of a-f.
    """
    if per_line < 0:
        raise ValueError(f"per_line must be >= 0, got {per_line}")
    fmt = "{:02X}" if uppercase else "{:02x}"
    data = bytes(data)
    if not data:
        return ""
    step = per_line or len(data)
    lines: List[str] = []
    for i in range(0, len(data), step):
        lines.append(" ".join(fmt.format(b) for b in data[i:i + step]))
    return "\n".join(lines) + "\n"
