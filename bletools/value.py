"""A BLE attribute value that may be written in parts."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

_log = logging.getLogger(__name__)


@dataclass
class BleValue:
    """The current value of an attribute plus a pending accumulation of parts."""

    value: bytes = b""
    read_offset: int = 0
    _accumulation: bytearray = field(default_factory=bytearray, init=False, repr=False)

    def add_part(self, part: Union[bytes, bytearray, str]) -> None:
        """Append a part to the pending accumulation."""
        if isinstance(part, str):
            part = part.encode("latin-1")
        _log.debug("add_part: length=%d", len(part))
        self._accumulation += part

    def cancel(self) -> None:
        """Discard the pending accumulation."""
        self._accumulation.clear()
        self.read_offset = 0

    def commit(self) -> None:
        """Make the pending accumulation the current value, if there is any."""
        if not self._accumulation:
            return
        self.value = bytes(self._accumulation)
        self._accumulation.clear()
        self.read_offset = 0

    def __len__(self) -> int:
        return len(self.value)