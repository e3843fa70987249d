import pytest

from bletools.gatt_status import (
    GattConnReason,
    GattStatus,
    gatt_close_reason_to_string,
    gatt_status_to_string,
)


@pytest.mark.parametrize(
    "status, expected",
    [
        (GattStatus.OK, "ESP_GATT_OK"),
        (GattStatus.INVALID_HANDLE, "ESP_GATT_INVALID_HANDLE"),
        (GattStatus.BUSY, "ESP_GATT_BUSY"),
        (GattStatus.ENCRYPED_NO_MITM, "ESP_GATT_ENCRYPED_NO_MITM"),
        (GattStatus.OUT_OF_RANGE, "ESP_GATT_OUT_OF_RANGE"),
    ],
)
def test_status_names(status, expected):
    assert gatt_status_to_string(status) == expected


def test_every_status_has_prefixed_name():
    for status in GattStatus:
        assert gatt_status_to_string(int(status)) == "ESP_GATT_" + status.name


def test_status_names_are_distinct():
    names = {gatt_status_to_string(status) for status in GattStatus}
    assert len(names) == len(GattStatus)


def test_unknown_status():
    assert gatt_status_to_string(0x12) == "Unknown"
    assert gatt_status_to_string(-1) == "Unknown"


@pytest.mark.parametrize(
    "reason, expected",
    [
        (GattConnReason.UNKNOWN, "ESP_GATT_CONN_UNKNOWN"),
        (GattConnReason.TIMEOUT, "ESP_GATT_CONN_TIMEOUT"),
        (GattConnReason.TERMINATE_PEER_USER, "ESP_GATT_CONN_TERMINATE_PEER_USER"),
        (GattConnReason.CONN_CANCEL, "ESP_GATT_CONN_CONN_CANCEL"),
        (GattConnReason.NONE, "ESP_GATT_CONN_NONE"),
    ],
)
def test_close_reason_names(reason, expected):
    assert gatt_close_reason_to_string(reason) == expected


def test_every_reason_has_prefixed_name():
    for reason in GattConnReason:
        assert gatt_close_reason_to_string(int(reason)) == "ESP_GATT_CONN_" + reason.name


def test_unknown_close_reason():
    assert gatt_close_reason_to_string(0x7777) == "Unknown"