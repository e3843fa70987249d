"""GATT client and server callback event types and their names."""

from __future__ import annotations

import enum
import logging

_log = logging.getLogger(__name__)

_UNKNOWN = "Unknown"


class GattcEvent(enum.IntEnum):
    """Events delivered to a GATT client callback."""

    REG = 0
    UNREG = 1
    OPEN = 2
    READ_CHAR = 3
    WRITE_CHAR = 4
    CLOSE = 5
    SEARCH_CMPL = 6
    SEARCH_RES = 7
    READ_DESCR = 8
    WRITE_DESCR = 9
    NOTIFY = 10
    PREP_WRITE = 11
    EXEC = 12
    ACL = 13
    CANCEL_OPEN = 14
    SRVC_CHG = 15
    ENC_CMPL_CB = 17
    CFG_MTU = 18
    ADV_DATA = 19
    MULT_ADV_ENB = 20
    MULT_ADV_UPD = 21
    MULT_ADV_DATA = 22
    MULT_ADV_DIS = 23
    CONGEST = 24
    BTH_SCAN_ENB = 25
    BTH_SCAN_CFG = 26
    BTH_SCAN_RD = 27
    BTH_SCAN_THR = 28
    BTH_SCAN_PARAM = 29
    BTH_SCAN_DIS = 30
    SCAN_FLT_CFG = 31
    SCAN_FLT_PARAM = 32
    SCAN_FLT_STATUS = 33
    ADV_VSC = 34
    REG_FOR_NOTIFY = 38
    UNREG_FOR_NOTIFY = 39
    CONNECT = 40
    DISCONNECT = 41


class GattsEvent(enum.IntEnum):
    """Events delivered to a GATT server callback."""

    REG = 0
    READ = 1
    WRITE = 2
    EXEC_WRITE = 3
    MTU = 4
    CONF = 5
    UNREG = 6
    CREATE = 7
    ADD_INCL_SRVC = 8
    ADD_CHAR = 9
    ADD_CHAR_DESCR = 10
    DELETE = 11
    START = 12
    STOP = 13
    CONNECT = 14
    DISCONNECT = 15
    OPEN = 16
    CANCEL_OPEN = 17
    CLOSE = 18
    LISTEN = 19
    CONGEST = 20
    RESPONSE = 21
    CREAT_ATTR_TAB = 22
    SET_ATTR_VAL = 23
    SEND_SERVICE_CHANGE = 24


def gatt_client_event_type_to_string(event_type: int) -> str:
    """Return the name of a GATT client event, or "Unknown"."""
    try:
        return f"ESP_GATTC_{GattcEvent(event_type).name}_EVT"
    except ValueError:
        _log.debug("Unknown GATT Client event type: %d", event_type)
        return _UNKNOWN


def gatt_server_event_type_to_string(event_type: int) -> str:
    """Return the name of a GATT server event, or "Unknown"."""
    try:
        return f"ESP_GATTS_{GattsEvent(event_type).name}_EVT"
    except ValueError:
        return _UNKNOWN