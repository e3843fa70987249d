"""Descriptions of BLE advertising data, addresses and GATT identifiers."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Dict, Union

from .uuid import BleUuid

_log = logging.getLogger(__name__)


class AdvType(enum.IntEnum):
    """Advertising data types."""

    FLAG = 0x01
    SRV16_PART = 0x02
    SRV16_CMPL = 0x03
    SRV32_PART = 0x04
    SRV32_CMPL = 0x05
    SRV128_PART = 0x06
    SRV128_CMPL = 0x07
    NAME_SHORT = 0x08
    NAME_CMPL = 0x09
    TX_PWR = 0x0A
    DEV_CLASS = 0x0B
    SM_TK = 0x10
    SM_OOB_FLAG = 0x11
    INT_RANGE = 0x12
    SOL_SRV_UUID = 0x14
    SOL128_SRV_UUID = 0x15
    SERVICE_DATA = 0x16
    PUBLIC_TARGET = 0x17
    RANDOM_TARGET = 0x18
    APPEARANCE = 0x19
    ADV_INT = 0x1A
    SOL32_SRV_UUID = 0x1F
    SERVICE_DATA32 = 0x20
    SERVICE_DATA128 = 0x21
    MANUFACTURER_SPECIFIC = 0xFF


_ADV_TYPE_NAMES: Dict[int, str] = {
    AdvType.FLAG: "ESP_BLE_AD_TYPE_FLAG",
    AdvType.SRV16_PART: "ESP_BLE_AD_TYPE_16SRV_PART",
    AdvType.SRV16_CMPL: "ESP_BLE_AD_TYPE_16SRV_CMPL",
    AdvType.SRV32_PART: "ESP_BLE_AD_TYPE_32SRV_PART",
    AdvType.SRV32_CMPL: "ESP_BLE_AD_TYPE_32SRV_CMPL",
    AdvType.SRV128_PART: "ESP_BLE_AD_TYPE_128SRV_PART",
    AdvType.SRV128_CMPL: "ESP_BLE_AD_TYPE_128SRV_CMPL",
    AdvType.NAME_SHORT: "ESP_BLE_AD_TYPE_NAME_SHORT",
    AdvType.NAME_CMPL: "ESP_BLE_AD_TYPE_NAME_CMPL",
    AdvType.TX_PWR: "ESP_BLE_AD_TYPE_TX_PWR",
    AdvType.DEV_CLASS: "ESP_BLE_AD_TYPE_DEV_CLASS",
    AdvType.SM_TK: "ESP_BLE_AD_TYPE_SM_TK",
    AdvType.SM_OOB_FLAG: "ESP_BLE_AD_TYPE_SM_OOB_FLAG",
    AdvType.INT_RANGE: "ESP_BLE_AD_TYPE_INT_RANGE",
    AdvType.SOL_SRV_UUID: "ESP_BLE_AD_TYPE_SOL_SRV_UUID",
    AdvType.SOL128_SRV_UUID: "ESP_BLE_AD_TYPE_128SOL_SRV_UUID",
    AdvType.SERVICE_DATA: "ESP_BLE_AD_TYPE_SERVICE_DATA",
    AdvType.PUBLIC_TARGET: "ESP_BLE_AD_TYPE_PUBLIC_TARGET",
    AdvType.RANDOM_TARGET: "ESP_BLE_AD_TYPE_RANDOM_TARGET",
    AdvType.APPEARANCE: "ESP_BLE_AD_TYPE_APPEARANCE",
    AdvType.ADV_INT: "ESP_BLE_AD_TYPE_ADV_INT",
    AdvType.SOL32_SRV_UUID: "ESP_BLE_AD_TYPE_32SOL_SRV_UUID",
    AdvType.SERVICE_DATA32: "ESP_BLE_AD_TYPE_32SERVICE_DATA",
    AdvType.SERVICE_DATA128: "ESP_BLE_AD_TYPE_128SERVICE_DATA",
    AdvType.MANUFACTURER_SPECIFIC: "ESP_BLE_AD_MANUFACTURER_SPECIFIC_TYPE",
}

_ADDRESS_TYPE_NAMES: Dict[int, str] = {
    0: "BLE_ADDR_TYPE_PUBLIC",
    1: "BLE_ADDR_TYPE_RANDOM",
    2: "BLE_ADDR_TYPE_RPA_PUBLIC",
    3: "BLE_ADDR_TYPE_RPA_RANDOM",
}

_DEV_TYPE_NAMES: Dict[int, str] = {
    1: "ESP_BT_DEVICE_TYPE_BREDR",
    2: "ESP_BT_DEVICE_TYPE_BLE",
    3: "ESP_BT_DEVICE_TYPE_DUMO",
}

_EVENT_TYPE_NAMES: Dict[int, str] = {
    0: "ESP_BLE_EVT_CONN_ADV",
    1: "ESP_BLE_EVT_CONN_DIR_ADV",
    2: "ESP_BLE_EVT_DISC_ADV",
    3: "ESP_BLE_EVT_NON_CONN_ADV",
    4: "ESP_BLE_EVT_SCAN_RSP",
}

_AD_FLAG_TEXT = (
    "[LE Limited Discoverable Mode] ",
    "[LE General Discoverable Mode] ",
    "[BR/EDR Not Supported] ",
    "[Simultaneous LE and BR/EDR to Same Device Capable (Controller)] ",
    "[Simultaneous LE and BR/EDR to Same Device Capable (Host)] ",
)

_CHAR_PROPERTIES = (
    ("broadcast", 0x01),
    ("read", 0x02),
    ("write_nr", 0x04),
    ("write", 0x08),
    ("notify", 0x10),
    ("indicate", 0x20),
    ("auth", 0x40),
)

_HEX_DATA_LIMIT = 100


@dataclass(frozen=True)
class GattId:
    """A GATT attribute identifier: a UUID and an instance id."""

    uuid: BleUuid
    inst_id: int = 0


@dataclass(frozen=True)
class GattServiceId:
    """A GATT service identifier."""

    id: GattId
    is_primary: bool = True


def ad_flags_to_string(flags: int) -> str:
    """Describe the bits of an advertising flags byte."""
    return "".join(text for bit, text in enumerate(_AD_FLAG_TEXT) if flags & (1 << bit))


def adv_type_to_string(adv_type: int) -> str:
    """Return the name of an advertising data type, or "" if unknown."""
    name = _ADV_TYPE_NAMES.get(adv_type)
    if name is None:
        _log.debug("adv data type: 0x%x", adv_type)
        return ""
    return name


def address_type_to_string(addr_type: int) -> str:
    """Return the name of a BLE address type."""
    return _ADDRESS_TYPE_NAMES.get(addr_type, " esp_ble_addr_type_t")


def dev_type_to_string(dev_type: int) -> str:
    """Return the name of a Bluetooth device type."""
    return _DEV_TYPE_NAMES.get(dev_type, "Unknown")


def event_type_to_string(event_type: int) -> str:
    """Return the name of a BLE advertising event type."""
    name = _EVENT_TYPE_NAMES.get(event_type)
    if name is None:
        _log.debug("Unknown esp_ble_evt_type_t: %d (0x%02x)", event_type, event_type)
        return "*** Unknown ***"
    return name


def characteristic_properties_to_string(prop: int) -> str:
    """Describe each characteristic property bit as 0 or 1."""
    return ", ".join(f"{name}: {1 if prop & bit else 0}" for name, bit in _CHAR_PROPERTIES)


def build_hex_data(data: Union[bytes, bytearray]) -> str:
    """Return lower-case hex of at most the first 100 bytes of ``data``."""
    return bytes(data[:_HEX_DATA_LIMIT]).hex()


def build_print_data(data: Union[bytes, bytearray]) -> str:
    """Return ``data`` as text with unprintable bytes replaced by '.'."""
    return "".join(chr(byte) if 0x20 <= byte <= 0x7E else "." for byte in data)


def build_gatt_id(uuid: BleUuid, inst_id: int = 0) -> GattId:
    """Build a GATT id from a UUID and an instance id."""
    return GattId(uuid, inst_id)


def build_gatt_srvc_id(gatt_id: GattId, is_primary: bool = True) -> GattServiceId:
    """Build a GATT service id from a GATT id."""
    return GattServiceId(gatt_id, is_primary)


def gatt_id_to_string(gatt_id: GattId) -> str:
    """Describe a GATT id."""
    return f"uuid: {gatt_id.uuid}, inst_id: {gatt_id.inst_id}"


def gatt_service_id_to_string(srvc_id: GattServiceId) -> str:
    """Describe a GATT service id by its GATT id."""
    return gatt_id_to_string(srvc_id.id)


def service_element_to_string(uuid: BleUuid, start_handle: int, end_handle: int) -> str:
    """Describe a discovered service with its handle range."""
    return (
        f"[uuid: {uuid}, start_handle: {start_handle} 0x{start_handle:x}, "
        f"end_handle: {end_handle} 0x{end_handle:x}]"
    )