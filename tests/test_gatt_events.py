import pytest

from bletools.gatt_events import (
    GattcEvent,
    GattsEvent,
    gatt_client_event_type_to_string,
    gatt_server_event_type_to_string,
)


def test_client_event_names_from_source():
    assert gatt_client_event_type_to_string(GattcEvent.ACL) == "ESP_GATTC_ACL_EVT"
    assert gatt_client_event_type_to_string(GattcEvent.ENC_CMPL_CB) == "ESP_GATTC_ENC_CMPL_CB_EVT"
    assert (
        gatt_client_event_type_to_string(GattcEvent.UNREG_FOR_NOTIFY)
        == "ESP_GATTC_UNREG_FOR_NOTIFY_EVT"
    )


def test_server_event_names_from_source():
    assert gatt_server_event_type_to_string(GattsEvent.WRITE) == "ESP_GATTS_WRITE_EVT"
    assert (
        gatt_server_event_type_to_string(GattsEvent.SEND_SERVICE_CHANGE)
        == "ESP_GATTS_SEND_SERVICE_CHANGE_EVT"
    )
    assert gatt_server_event_type_to_string(GattsEvent.CREAT_ATTR_TAB) == "ESP_GATTS_CREAT_ATTR_TAB_EVT"


@pytest.mark.parametrize("event", list(GattcEvent))
def test_every_client_event_named(event):
    text = gatt_client_event_type_to_string(int(event))
    assert text.startswith("ESP_GATTC_") and text.endswith("_EVT")
    assert event.name in text


@pytest.mark.parametrize("event", list(GattsEvent))
def test_every_server_event_named(event):
    text = gatt_server_event_type_to_string(int(event))
    assert text == f"ESP_GATTS_{event.name}_EVT"


def test_client_names_are_distinct():
    names = {gatt_client_event_type_to_string(e) for e in GattcEvent}
    assert len(names) == len(GattcEvent)


@pytest.mark.parametrize("code", [16, 35, 1000, -1])
def test_unknown_client_event(code):
    assert gatt_client_event_type_to_string(code) == "Unknown"


@pytest.mark.parametrize("code", [25, 999, -5])
def test_unknown_server_event(code):
    assert gatt_server_event_type_to_string(code) == "Unknown"