"""GATT status codes and connection close reasons."""

from __future__ import annotations

import enum

_UNKNOWN = "Unknown"


class GattStatus(enum.IntEnum):
    """Status codes reported by GATT operations."""

    OK = 0x00
    INVALID_HANDLE = 0x01
    READ_NOT_PERMIT = 0x02
    WRITE_NOT_PERMIT = 0x03
    INVALID_PDU = 0x04
    INSUF_AUTHENTICATION = 0x05
    REQ_NOT_SUPPORTED = 0x06
    INVALID_OFFSET = 0x07
    INSUF_AUTHORIZATION = 0x08
    PREPARE_Q_FULL = 0x09
    NOT_FOUND = 0x0A
    NOT_LONG = 0x0B
    INSUF_KEY_SIZE = 0x0C
    INVALID_ATTR_LEN = 0x0D
    ERR_UNLIKELY = 0x0E
    INSUF_ENCRYPTION = 0x0F
    UNSUPPORT_GRP_TYPE = 0x10
    INSUF_RESOURCE = 0x11
    NO_RESOURCES = 0x80
    INTERNAL_ERROR = 0x81
    WRONG_STATE = 0x82
    DB_FULL = 0x83
    BUSY = 0x84
    ERROR = 0x85
    CMD_STARTED = 0x86
    ILLEGAL_PARAMETER = 0x87
    PENDING = 0x88
    AUTH_FAIL = 0x89
    MORE = 0x8A
    INVALID_CFG = 0x8B
    SERVICE_STARTED = 0x8C
    ENCRYPED_NO_MITM = 0x8D
    NOT_ENCRYPTED = 0x8E
    CONGESTED = 0x8F
    DUP_REG = 0x90
    ALREADY_OPEN = 0x91
    CANCEL = 0x92
    STACK_RSP = 0xE0
    APP_RSP = 0xE1
    UNKNOWN_ERROR = 0xEF
    CCC_CFG_ERR = 0xFD
    PRC_IN_PROGRESS = 0xFE
    OUT_OF_RANGE = 0xFF


class GattConnReason(enum.IntEnum):
    """Reasons a GATT connection was closed."""

    UNKNOWN = 0x0000
    L2C_FAILURE = 0x0001
    TIMEOUT = 0x0008
    TERMINATE_PEER_USER = 0x0013
    TERMINATE_LOCAL_HOST = 0x0016
    FAIL_ESTABLISH = 0x003E
    LMP_TIMEOUT = 0x0022
    CONN_CANCEL = 0x0100
    NONE = 0x0101


def gatt_status_to_string(status: int) -> str:
    """Return the name of a GATT status code, or "Unknown"."""
    try:
        return f"ESP_GATT_{GattStatus(status).name}"
    except ValueError:
        return _UNKNOWN


def gatt_close_reason_to_string(reason: int) -> str:
    """Return the name of a connection close reason, or "Unknown"."""
    try:
        return f"ESP_GATT_CONN_{GattConnReason(reason).name}"
    except ValueError:
        return _UNKNOWN