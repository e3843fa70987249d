import pytest

from bletools.service_map import ServiceMap
from bletools.uuid import BleUuid


class FakeService:
    def __init__(self, uuid, handle):
        self.uuid = uuid
        self.handle = handle
        self.events = []

    def handle_gatts_event(self, event, gatts_if, param):
        self.events.append((event, gatts_if, param))


def _register(service_map, service):
    service_map.set_by_uuid(service.uuid, service)
    service_map.set_by_handle(service.handle, service)


@pytest.fixture
def populated():
    service_map = ServiceMap()
    battery = FakeService(BleUuid.from_uint16(0x180F), 0x28)
    heart = FakeService(BleUuid.from_uint16(0x180D), 0x10)
    _register(service_map, battery)
    _register(service_map, heart)
    return service_map, battery, heart


def test_lookup_by_uuid(populated):
    service_map, battery, heart = populated
    assert service_map.get_by_uuid(BleUuid.from_uint16(0x180D)) is heart
    assert service_map.get_by_uuid("180F") is battery


def test_lookup_by_uuid_missing(populated):
    service_map, _, _ = populated
    assert service_map.get_by_uuid(BleUuid.from_uint16(0x1800)) is None


def test_lookup_by_full_uuid_matches_short(populated):
    service_map, _, heart = populated
    assert service_map.get_by_uuid(str(BleUuid.from_uint16(0x180D))) is heart


def test_lookup_by_handle(populated):
    service_map, battery, _ = populated
    assert service_map.get_by_handle(0x28) is battery
    with pytest.raises(KeyError):
        service_map.get_by_handle(0x99)


def test_existing_handle_entry_kept(populated):
    service_map, battery, _ = populated
    service_map.set_by_handle(0x28, FakeService(BleUuid.from_uint16(1), 0x28))
    assert service_map.get_by_handle(0x28) is battery


def test_count_and_remove(populated):
    service_map, battery, heart = populated
    assert service_map.registered_service_count() == 2
    service_map.remove_service(battery)
    assert service_map.registered_service_count() == 1
    assert list(service_map) == [heart]
    assert service_map.get_by_uuid("180F") is None


def test_iteration_yields_all(populated):
    service_map, battery, heart = populated
    assert set(service_map) == {battery, heart}


def test_events_reach_every_service(populated):
    service_map, battery, heart = populated
    service_map.handle_gatts_event("write", 3, {"len": 1})
    assert battery.events == [("write", 3, {"len": 1})]
    assert heart.events == [("write", 3, {"len": 1})]


def test_string_lists_handles_in_order(populated):
    service_map, battery, heart = populated
    assert str(service_map) == (
        f"handle: 0x10, uuid: {heart.uuid}\n"
        f"handle: 0x28, uuid: {battery.uuid}\n"
    )


def test_empty_map():
    service_map = ServiceMap()
    assert str(service_map) == ""
    assert list(service_map) == []
    assert service_map.registered_service_count() == 0