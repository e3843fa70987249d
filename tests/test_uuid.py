import pytest

from bletools.uuid import BleUuid

LONG = "beb5483e-36e1-4688-b7f5-ea07361b26a8"


def test_16bit_string_form():
    assert str(BleUuid.from_uint16(0x180D)) == "0000180d-0000-1000-8000-00805f9b34fb"


def test_32bit_string_form():
    assert str(BleUuid.from_uint32(0x12345678)) == "12345678-0000-1000-8000-00805f9b34fb"


def test_long_text_round_trip():
    uuid = BleUuid.from_text(LONG)
    assert uuid.bit_size() == 128
    assert str(uuid) == LONG


def test_upper_case_text_prints_lower_case():
    assert str(BleUuid.from_text(LONG.upper())) == LONG


def test_short_text_matches_integer():
    assert BleUuid.from_text("180D") == BleUuid.from_uint16(0x180D)
    assert BleUuid.from_text("180d").bit_size() == 16


def test_32bit_text_equals_16bit_with_same_value():
    wide = BleUuid.from_text("0000180D")
    assert wide.bit_size() == 32
    assert wide == BleUuid.from_uint16(0x180D)


def test_to128_keeps_identity():
    short = BleUuid.from_uint16(0x2A19)
    full = short.to128()
    assert full.bit_size() == 128
    assert full == short
    assert str(full) == str(short)


def test_to128_of_128_bit_is_same():
    uuid = BleUuid.from_text(LONG)
    assert uuid.to128() == uuid


def test_from_bytes_orders():
    data = bytes(range(16))
    assert BleUuid.from_bytes(data, True) == BleUuid.from_bytes(data[::-1], False)
    assert str(BleUuid.from_bytes(data, True)).replace("-", "") == data.hex()


def test_from_bytes_wrong_size():
    with pytest.raises(ValueError):
        BleUuid.from_bytes(b"\x00" * 15, True)


def test_sixteen_char_text_is_raw_bytes():
    assert BleUuid.from_text("abcdefghijklmnop") == BleUuid.from_bytes(b"abcdefghijklmnop", True)


def test_from_text_bad_length():
    with pytest.raises(ValueError):
        BleUuid.from_text("123")


def test_from_text_bad_hex():
    with pytest.raises(ValueError):
        BleUuid.from_text("zz12")


def test_parse_forms():
    assert BleUuid.parse("0x180d") == BleUuid.from_uint16(0x180D)
    assert BleUuid.parse("0x0000180d").bit_size() == 32
    assert BleUuid.parse(LONG) == BleUuid.from_text(LONG)
    assert BleUuid.parse("0x" + LONG) == BleUuid.from_text(LONG)


def test_parse_other_length_is_empty():
    uuid = BleUuid.parse("abc")
    assert uuid.bit_size() == 0
    assert str(uuid) == "<NULL>"


def test_empty_never_equal():
    assert not (BleUuid.empty() == BleUuid.empty())
    assert not (BleUuid.empty() == BleUuid.from_uint16(0))


def test_different_values_not_equal():
    assert not (BleUuid.from_uint16(1) == BleUuid.from_uint16(2))


def test_range_checks():
    with pytest.raises(ValueError):
        BleUuid.from_uint16(0x10000)
    with pytest.raises(ValueError):
        BleUuid.from_uint32(-1)


def test_hash_consistent_with_equality():
    found = {BleUuid.from_uint16(0x180D)}
    assert BleUuid.from_uint32(0x180D) in found
    assert BleUuid.from_uint16(0x180D).to128() in found