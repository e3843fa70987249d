"""Base64 coding and hex dumps of binary data."""

from __future__ import annotations

import base64
import logging
from typing import Dict, List, Union

_log = logging.getLogger(__name__)

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_LOOKUP: Dict[str, int] = {char: index for index, char in enumerate(_ALPHABET)}

_HEADER = "     00 01 02 03 04 05 06 07 08 09 0a 0b 0c 0d 0e 0f"
_RULE = "     -- -- -- -- -- -- -- -- -- -- -- -- -- -- -- --"
_LINE_WIDTH = 16


def _as_bytes(data: Union[bytes, bytearray, str]) -> bytes:
    if isinstance(data, str):
        return data.encode("latin-1")
    return bytes(data)


def base64_encode(data: Union[bytes, bytearray, str]) -> str:
    """Encode ``data`` as padded base 64 text."""
    return base64.b64encode(_as_bytes(data)).decode("ascii")


def base64_decode(text: str) -> bytes:
    """Decode base 64 text; decoding stops at the first ``=``.

    Raises ValueError for characters outside the alphabet or when the decoded
    length does not match the length implied by the text and its padding.
    """
    if not text:
        return b""
    body = text.split("=", 1)[0]
    try:
        values = [_LOOKUP[char] for char in body]
    except KeyError as exc:
        raise ValueError(f"invalid base 64 character: {exc.args[0]!r}") from None

    out = bytearray()
    for start in range(0, len(values), 4):
        chunk = values[start:start + 4]
        count = len(chunk)
        padded = chunk + [0] * (4 - count)
        word = (padded[0] << 18) | (padded[1] << 12) | (padded[2] << 6) | padded[3]
        keep = 3 if count == 4 else max(count - 1, 0)
        out += word.to_bytes(3, "big")[:keep]

    padding = len(text) - len(text.rstrip("="))
    expected = (6 * len(text)) // 8 - padding
    if len(out) != expected:
        raise ValueError(
            f"malformed base 64 text: decoded {len(out)} bytes, expected {expected}"
        )
    return bytes(out)


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte <= 0x7E else "."


def hex_dump(data: Union[bytes, bytearray]) -> List[str]:
    """Return a hex and ASCII dump of ``data``, sixteen bytes per line.

    The lines are also written to the module logger at debug level.
    """
    data = bytes(data)
    lines = [_HEADER, _RULE]
    for offset in range(0, len(data), _LINE_WIDTH):
        row = data[offset:offset + _LINE_WIDTH]
        hex_part = "".join(f"{byte:02x} " for byte in row)
        hex_part += "   " * (_LINE_WIDTH - len(row))
        ascii_part = "".join(_printable(byte) for byte in row)
        lines.append(f"{offset:04x} {hex_part} {ascii_part}")
    for line in lines:
        _log.debug("%s", line)
    return lines