"""Base64 encoding and decoding of byte buffers.

The encoded length is padded with ``=`` up to a multiple of three characters,
and decoding drops any trailing padding before it starts.
"""

from __future__ import annotations

import base64
import string
from typing import Any

from strawberry.buffers import DynamicByteBuffer
from strawberry.mathutil import ceil_div, round_up_to_multiple

_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"
_DECODING = {char: index for index, char in enumerate(_ALPHABET)}


def encode(data: Any) -> str:
    """Encode bytes, a string as UTF-8, or a buffer into base64 text."""
    raw = bytes(DynamicByteBuffer(data))
    encoded = base64.b64encode(raw).decode("ascii").rstrip("=")
    target = round_up_to_multiple(ceil_div(8 * len(raw), 6), 3)
    return encoded.ljust(target, "=")


def decode(encoded: str) -> DynamicByteBuffer:
    """Decode base64 text; a character outside the alphabet raises ``ValueError``."""
    stripped = encoded.rstrip("=")
    try:
        values = [_DECODING[char] for char in stripped]
    except KeyError as exc:
        raise ValueError(f"invalid base64 character {exc.args[0]!r}") from None

    out = bytearray()
    full = len(values) - len(values) % 4
    chunks = iter(values[:full])
    for a, b, c, d in zip(chunks, chunks, chunks, chunks):
        out.append((a << 2 | b >> 4) & 0xFF)
        out.append((b << 4 | c >> 2) & 0xFF)
        out.append((c << 6 | d) & 0xFF)

    rest = values[full:]
    if len(rest) == 1:
        out.append((rest[0] << 6) & 0xFF)
    elif len(rest) >= 2:
        out.append((rest[0] << 2 | rest[1] >> 4) & 0xFF)
        if len(rest) == 3:
            out.append((rest[1] << 4 | rest[2] >> 2) & 0xFF)
    return DynamicByteBuffer(out)