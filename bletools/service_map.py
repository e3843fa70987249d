"""A registry of GATT services, looked up by UUID or handle."""

from __future__ import annotations

from typing import Any, Dict, Iterator, Protocol, Union

from .uuid import BleUuid


class Service(Protocol):
    """What the map needs from a service."""

    uuid: BleUuid
    handle: int

    def handle_gatts_event(self, event: Any, gatts_if: Any, param: Any) -> None: ...


class ServiceMap:
    """Services registered by UUID and by handle."""

    def __init__(self) -> None:
        self._by_service: Dict[Service, str] = {}
        self._by_handle: Dict[int, Service] = {}

    def get_by_uuid(self, uuid: Union[BleUuid, str]) -> Service | None:
        """Return the first service whose UUID equals ``uuid``, or None."""
        if isinstance(uuid, str):
            uuid = BleUuid.from_text(uuid)
        return next((s for s in self._by_service if s.uuid == uuid), None)

    def get_by_handle(self, handle: int) -> Service:
        """Return the service at ``handle``; raise KeyError if there is none."""
        return self._by_handle[handle]

    def set_by_uuid(self, uuid: BleUuid, service: Service) -> None:
        """Register a service under its UUID; an existing entry is kept."""
        self._by_service.setdefault(service, str(uuid))

    def set_by_handle(self, handle: int, service: Service) -> None:
        """Register a service under a handle; an existing entry is kept."""
        self._by_handle.setdefault(handle, service)

    def remove_service(self, service: Service) -> None:
        """Remove a service from both registries."""
        self._by_handle.pop(service.handle, None)
        self._by_service.pop(service, None)

    def handle_gatts_event(self, event: Any, gatts_if: Any, param: Any) -> None:
        """Pass a GATT server event to every registered service."""
        for service in list(self._by_service):
            service.handle_gatts_event(event, gatts_if, param)

    def registered_service_count(self) -> int:
        """Return the number of services registered by handle."""
        return len(self._by_handle)

    def __iter__(self) -> Iterator[Service]:
        return iter(list(self._by_service))

    def __str__(self) -> str:
        return "".join(
            f"handle: 0x{handle:02x}, uuid: {self._by_handle[handle].uuid}\n"
            for handle in sorted(self._by_handle)
        )