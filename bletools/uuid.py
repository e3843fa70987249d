"""Bluetooth Low Energy UUIDs in their 16, 32 and 128 bit forms."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Union

_log = logging.getLogger(__name__)

_BASE_SUFFIX = "-0000-1000-8000-00805f9b34fb"
# The Bluetooth base UUID with the 32-bit variable part zeroed.
_BASE_128 = 0x0000000000001000800000805F9B34FB
_HEX = re.compile(r"[0-9a-fA-F]+")


def _parse_hex(text: str) -> int:
    if not _HEX.fullmatch(text):
        raise ValueError(f"not a hexadecimal value: {text!r}")
    return int(text, 16)


@dataclass(frozen=True, eq=False)
class BleUuid:
    """A BLE UUID; ``bits`` is 0 when no value is set."""

    bits: int = 0
    value: int = 0

    @classmethod
    def empty(cls) -> BleUuid:
        """Return a UUID that holds no value."""
        return cls()

    @classmethod
    def from_text(cls, value: str) -> BleUuid:
        """Build a UUID from text.

        Four or eight characters are hex for a 16 or 32 bit UUID, sixteen
        characters are the raw bytes of a 128 bit UUID (most significant
        first) and thirty-six characters are the dashed hex form.
        """
        length = len(value)
        if length == 4:
            return cls(16, _parse_hex(value))
        if length == 8:
            return cls(32, _parse_hex(value))
        if length == 16:
            return cls(128, int.from_bytes(value.encode("latin-1"), "big"))
        if length == 36:
            digits = value.replace("-", "")
            if len(digits) != 32:
                raise ValueError(f"malformed UUID: {value!r}")
            return cls(128, _parse_hex(digits))
        _log.error("UUID value not 4, 8, 16 or 36 characters: %r", value)
        raise ValueError(f"UUID text must be 4, 8, 16 or 36 characters, got {length}")

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray], msb_first: bool) -> BleUuid:
        """Build a 128 bit UUID from 16 bytes."""
        if len(data) != 16:
            _log.error("UUID length not 16 bytes")
            raise ValueError(f"UUID data must be 16 bytes, got {len(data)}")
        order = "big" if msb_first else "little"
        return cls(128, int.from_bytes(bytes(data), order))

    @classmethod
    def from_uint16(cls, value: int) -> BleUuid:
        """Build a 16 bit short-form UUID."""
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"16 bit UUID out of range: {value}")
        return cls(16, value)

    @classmethod
    def from_uint32(cls, value: int) -> BleUuid:
        """Build a 32 bit short-form UUID."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"32 bit UUID out of range: {value}")
        return cls(32, value)

    @classmethod
    def parse(cls, text: str) -> BleUuid:
        """Parse ``NNNN``, ``NNNNNNNN`` or a dashed UUID, optionally prefixed by ``0x``.

        Text of any other length gives an empty UUID.
        """
        body = text[2:] if text.startswith("0x") else text
        if len(body) == 4:
            return cls(16, _parse_hex(body))
        if len(body) == 8:
            return cls(32, _parse_hex(body))
        if len(body) == 36:
            return cls.from_text(body)
        return cls.empty()

    def bit_size(self) -> int:
        """Return 16, 32 or 128, or 0 if no value is set."""
        return self.bits

    def to128(self) -> BleUuid:
        """Return the full 128 bit form of this UUID."""
        if self.bits in (0, 128):
            return self
        return BleUuid(128, _BASE_128 | (self.value << 96))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BleUuid):
            return NotImplemented
        if not self.bits or not other.bits:
            return False
        if self.bits != other.bits:
            return str(self) == str(other)
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(str(self))

    def __str__(self) -> str:
        if self.bits == 0:
            return "<NULL>"
        if self.bits == 16:
            return f"0000{self.value:04x}{_BASE_SUFFIX}"
        if self.bits == 32:
            return f"{self.value:08x}{_BASE_SUFFIX}"
        h = f"{self.value:032x}"
        return f"{h[0:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:32]}"