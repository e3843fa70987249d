"""GAP callback and discovery search event types and their names."""

from __future__ import annotations

import enum
import logging

_log = logging.getLogger(__name__)

_UNKNOWN = "Unknown event type"


class GapEvent(enum.IntEnum):
    """Events delivered to a BLE GAP callback."""

    ADV_DATA_SET_COMPLETE = 0
    SCAN_RSP_DATA_SET_COMPLETE = 1
    SCAN_PARAM_SET_COMPLETE = 2
    SCAN_RESULT = 3
    ADV_DATA_RAW_SET_COMPLETE = 4
    SCAN_RSP_DATA_RAW_SET_COMPLETE = 5
    ADV_START_COMPLETE = 6
    SCAN_START_COMPLETE = 7
    AUTH_CMPL = 8
    KEY = 9
    SEC_REQ = 10
    PASSKEY_NOTIF = 11
    PASSKEY_REQ = 12
    OOB_REQ = 13
    LOCAL_IR = 14
    LOCAL_ER = 15
    NC_REQ = 16
    ADV_STOP_COMPLETE = 17
    SCAN_STOP_COMPLETE = 18
    SET_STATIC_RAND_ADDR = 19
    UPDATE_CONN_PARAMS = 20
    SET_PKT_LENGTH_COMPLETE = 21
    SET_LOCAL_PRIVACY_COMPLETE = 22
    REMOVE_BOND_DEV_COMPLETE = 23
    CLEAR_BOND_DEV_COMPLETE = 24
    GET_BOND_DEV_COMPLETE = 25
    READ_RSSI_COMPLETE = 26


class SearchEvent(enum.IntEnum):
    """Sub-events of a GAP scan result."""

    INQ_RES = 0
    INQ_CMPL = 1
    DISC_RES = 2
    DISC_BLE_RES = 3
    DISC_CMPL = 4
    DI_DISC_CMPL = 5
    SEARCH_CANCEL_CMPL = 6


def gap_event_to_string(event_type: int) -> str:
    """Return the name of a GAP event, or "Unknown event type"."""
    try:
        return f"ESP_GAP_BLE_{GapEvent(event_type).name}_EVT"
    except ValueError:
        _log.debug("gap_event_to_string: Unknown event type %d 0x%02x", event_type, event_type)
        return _UNKNOWN


def search_event_type_to_string(search_evt: int) -> str:
    """Return the name of a GAP search event, or "Unknown event type"."""
    try:
        return f"ESP_GAP_SEARCH_{SearchEvent(search_evt).name}_EVT"
    except ValueError:
        _log.debug("Unknown event type: 0x%x", search_evt)
        return _UNKNOWN