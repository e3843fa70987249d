import pytest

from bletools.gatt_names import descriptor_name, service_name


@pytest.mark.parametrize(
    "uuid, expected",
    [
        (0x2902, "Client Characteristic Configuration"),
        (0x2901, "Characteristic User Description"),
        (0x290A, "Value Trigger Setting"),
        (0x2900, "Characteristic Extended Properties"),
    ],
)
def test_known_descriptors(uuid, expected):
    assert descriptor_name(uuid) == expected


def test_unknown_descriptor_is_empty():
    assert descriptor_name(0x2A00) == ""


@pytest.mark.parametrize(
    "uuid, expected",
    [
        (0x180D, "Heart Rate"),
        (0x180F, "Battery Service"),
        (0x1800, "Generic Access"),
        (0x181D, "Weight Scale"),
        (0x1812, "Human Interface Device"),
    ],
)
def test_known_services(uuid, expected):
    assert service_name(uuid) == expected


def test_unknown_service():
    assert service_name(0x2902) == "Unknown"


def test_zero_is_unknown_everywhere():
    assert service_name(0) == "Unknown"
    assert descriptor_name(0) == ""


def test_descriptor_range_all_named():
    names = [descriptor_name(uuid) for uuid in range(0x2900, 0x290F)]
    assert all(names)
    assert len(set(names)) == len(names)