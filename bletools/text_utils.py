"""Small string helpers and ESP error code names."""

from __future__ import annotations

import string
from typing import Dict, List, Sequence

_UNKNOWN_ERROR = "Unknown ESP_ERR error"

_LOWER_ASCII = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_ESP_ERRORS: Dict[int, str] = {
    0: "ESP_OK",
    -1: "ESP_FAIL",
    0x101: "ESP_ERR_NO_MEM",
    0x102: "ESP_ERR_INVALID_ARG",
    0x103: "ESP_ERR_INVALID_STATE",
    0x104: "ESP_ERR_INVALID_SIZE",
    0x105: "ESP_ERR_NOT_FOUND",
    0x106: "ESP_ERR_NOT_SUPPORTED",
    0x107: "ESP_ERR_TIMEOUT",
    0x1101: "ESP_ERR_NVS_NOT_INITIALIZED",
    0x1102: "ESP_ERR_NVS_NOT_FOUND",
    0x1103: "ESP_ERR_NVS_TYPE_MISMATCH",
    0x1104: "ESP_ERR_NVS_READ_ONLY",
    0x1105: "ESP_ERR_NVS_NOT_ENOUGH_SPACE",
    0x1106: "ESP_ERR_NVS_INVALID_NAME",
    0x1107: "ESP_ERR_NVS_INVALID_HANDLE",
    0x1108: "ESP_ERR_NVS_REMOVE_FAILED",
    0x1109: "ESP_ERR_NVS_KEY_TOO_LONG",
    0x110A: "ESP_ERR_NVS_PAGE_FULL",
    0x110B: "ESP_ERR_NVS_INVALID_STATE",
    0x110C: "ESP_ERR_NVS_INVALID_LENGTH",
    0x3001: "ESP_ERR_WIFI_NOT_INIT",
    0x3004: "ESP_ERR_WIFI_IF",
    0x3005: "ESP_ERR_WIFI_MODE",
    0x3006: "ESP_ERR_WIFI_STATE",
    0x3007: "ESP_ERR_WIFI_CONN",
    0x3008: "ESP_ERR_WIFI_NVS",
    0x3009: "ESP_ERR_WIFI_MAC",
    0x300A: "ESP_ERR_WIFI_SSID",
    0x300B: "ESP_ERR_WIFI_PASSWORD",
    0x300C: "ESP_ERR_WIFI_TIMEOUT",
    0x300D: "ESP_ERR_WIFI_WAKE_FAIL",
}

_WIFI_REASONS: Dict[int, str] = {
    1: "WIFI_REASON_UNSPECIFIED",
    2: "WIFI_REASON_AUTH_EXPIRE",
    3: "WIFI_REASON_AUTH_LEAVE",
    4: "WIFI_REASON_ASSOC_EXPIRE",
    5: "WIFI_REASON_ASSOC_TOOMANY",
    6: "WIFI_REASON_NOT_AUTHED",
    7: "WIFI_REASON_NOT_ASSOCED",
    8: "WIFI_REASON_ASSOC_LEAVE",
    9: "WIFI_REASON_ASSOC_NOT_AUTHED",
    10: "WIFI_REASON_DISASSOC_PWRCAP_BAD",
    11: "WIFI_REASON_DISASSOC_SUPCHAN_BAD",
    13: "WIFI_REASON_IE_INVALID",
    14: "WIFI_REASON_MIC_FAILURE",
    15: "WIFI_REASON_4WAY_HANDSHAKE_TIMEOUT",
    16: "WIFI_REASON_GROUP_KEY_UPDATE_TIMEOUT",
    17: "WIFI_REASON_IE_IN_4WAY_DIFFERS",
    18: "WIFI_REASON_GROUP_CIPHER_INVALID",
    19: "WIFI_REASON_PAIRWISE_CIPHER_INVALID",
    20: "WIFI_REASON_AKMP_INVALID",
    21: "WIFI_REASON_UNSUPP_RSN_IE_VERSION",
    22: "WIFI_REASON_INVALID_RSN_IE_CAP",
    23: "WIFI_REASON_802_1X_AUTH_FAILED",
    24: "WIFI_REASON_CIPHER_SUITE_REJECTED",
    200: "WIFI_REASON_BEACON_TIMEOUT",
    201: "WIFI_REASON_NO_AP_FOUND",
    202: "WIFI_REASON_AUTH_FAIL",
    203: "WIFI_REASON_ASSOC_FAIL",
    204: "WIFI_REASON_HANDSHAKE_TIMEOUT",
}


def ends_with(text: str, char: str) -> bool:
    """Return True if ``text`` is non-empty and its last character is ``char``."""
    return bool(text) and text[-1] == char


def ip_to_string(ip: Sequence[int]) -> str:
    """Format the first four bytes of ``ip`` as a dotted quad."""
    if len(ip) < 4:
        raise ValueError(f"an IP address needs 4 bytes, got {len(ip)}")
    return ".".join(str(octet) for octet in ip[:4])


def trim(text: str) -> str:
    """Strip leading and trailing spaces; text of spaces only is returned unchanged."""
    stripped = text.strip(" ")
    return stripped if stripped else text


def split(source: str, delimiter: str) -> List[str]:
    """Split on ``delimiter`` and trim each part; a trailing empty part is dropped."""
    parts = source.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return [trim(part) for part in parts]


def to_lower(value: str) -> str:
    """Return ``value`` with ASCII letters in lower case."""
    return value.translate(_LOWER_ASCII)


def error_to_string(code: int) -> str:
    """Return the name of an ESP error code."""
    return _ESP_ERRORS.get(code, _UNKNOWN_ERROR)


def wifi_error_to_string(code: int) -> str:
    """Return the name of a Wi-Fi disconnect reason code."""
    code &= 0xFF
    if code == 0:
        return "ESP_OK (received SYSTEM_EVENT_STA_GOT_IP event)"
    if code == 0xFF:
        return "Not Connected (default value)"
    return _WIFI_REASONS.get(code, _UNKNOWN_ERROR)