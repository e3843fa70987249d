# bletools

Pure-Python helpers for working with Bluetooth Low Energy data. The package
depends only on the standard library.

## What it offers

- `bletools.uuid.BleUuid`: 16, 32 and 128-bit BLE UUIDs. Build them with
  `from_text`, `from_bytes`, `from_uint16`, `from_uint32`, `parse` or `empty`.
  `bit_size()` gives 16, 32, 128, or 0 for an empty UUID, and `to128()` widens
  a short UUID onto the Bluetooth base UUID. `str()` gives the canonical dashed
  text form (`<NULL>` when empty). UUIDs of different widths compare equal when
  their text forms match; an empty UUID never equals anything.
- `bletools.value.BleValue`: an attribute value (`value`, `read_offset`) that
  collects parts with `add_part`, applies them with `commit` or drops them with
  `cancel`. `len()` gives the length of the current value.
- `bletools.service_map.ServiceMap`: services registered by UUID
  (`set_by_uuid`, `get_by_uuid`) and by handle (`set_by_handle`,
  `get_by_handle`, which raises `KeyError` for an unknown handle). A service is
  any object with `uuid`, `handle` and a `handle_gatts_event(event, gatts_if,
  param)` method; `ServiceMap.handle_gatts_event` passes an event to every
  registered service. The map also offers `remove_service`,
  `registered_service_count`, iteration over services and a `str()` listing of
  handles and UUIDs.
- `bletools.codec`: `base64_encode`, `base64_decode` (raises `ValueError` on
  bad input) and `hex_dump`, which returns the lines of a sixteen-bytes-per-line
  hex and ASCII dump and logs them at debug level.
- `bletools.text_utils`: `ends_with`, `ip_to_string`, `split`, `to_lower`,
  `trim`, and names for ESP error codes (`error_to_string`) and Wi-Fi
  disconnect reasons (`wifi_error_to_string`).
- `bletools.ble_utils`: descriptions of advertising flags, advertising data
  types (`AdvType`), address, device and event types, characteristic
  properties, hex and printable renderings of bytes, and the `GattId` /
  `GattServiceId` identifiers with their builders and string forms.
- `bletools.gatt_status`: `GattStatus` and `GattConnReason` with
  `gatt_status_to_string` and `gatt_close_reason_to_string`.
- `bletools.gatt_events`: `GattcEvent` and `GattsEvent` with their name
  functions.
- `bletools.gap_events`: `GapEvent` and `SearchEvent` with their name
  functions.
- `bletools.gatt_names`: `descriptor_name` and `service_name` for 16-bit
  assigned numbers.
- `bletools.members`: `member_name` for Bluetooth SIG member company UUIDs.

## Example

```python
from bletools.uuid import BleUuid
from bletools.gatt_names import service_name
from bletools.codec import base64_encode

heart_rate = BleUuid.from_uint16(0x180D)
print(heart_rate)                  # 0000180d-0000-1000-8000-00805f9b34fb
print(heart_rate == BleUuid.parse("0000180d-0000-1000-8000-00805f9b34fb"))  # True
print(service_name(0x180D))        # Heart Rate
print(base64_encode(b"BLE"))       # QkxF
```

## What it does not do

The package works on data only: it does not talk to a Bluetooth radio, scan,
connect or serve GATT attributes. It has no table of GATT characteristic names
and no HID keyboard keymaps, and it provides no command-line tool.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```