import pytest

from bletools.gap_events import (
    GapEvent,
    SearchEvent,
    gap_event_to_string,
    search_event_type_to_string,
)


def test_gap_event_names_from_source():
    assert gap_event_to_string(GapEvent.SCAN_RESULT) == "ESP_GAP_BLE_SCAN_RESULT_EVT"
    assert gap_event_to_string(GapEvent.AUTH_CMPL) == "ESP_GAP_BLE_AUTH_CMPL_EVT"
    assert (
        gap_event_to_string(GapEvent.SCAN_RSP_DATA_RAW_SET_COMPLETE)
        == "ESP_GAP_BLE_SCAN_RSP_DATA_RAW_SET_COMPLETE_EVT"
    )


def test_search_event_names_from_source():
    assert search_event_type_to_string(SearchEvent.INQ_RES) == "ESP_GAP_SEARCH_INQ_RES_EVT"
    assert (
        search_event_type_to_string(SearchEvent.SEARCH_CANCEL_CMPL)
        == "ESP_GAP_SEARCH_SEARCH_CANCEL_CMPL_EVT"
    )


@pytest.mark.parametrize("event", list(GapEvent))
def test_every_gap_event_named(event):
    assert gap_event_to_string(int(event)) == f"ESP_GAP_BLE_{event.name}_EVT"


@pytest.mark.parametrize("event", list(SearchEvent))
def test_every_search_event_named(event):
    assert search_event_type_to_string(int(event)) == f"ESP_GAP_SEARCH_{event.name}_EVT"


def test_gap_names_are_distinct():
    names = {gap_event_to_string(e) for e in GapEvent}
    assert len(names) == len(GapEvent)


@pytest.mark.parametrize("code", [27, 500, -1])
def test_unknown_gap_event(code):
    assert gap_event_to_string(code) == "Unknown event type"


@pytest.mark.parametrize("code", [7, 99, -2])
def test_unknown_search_event(code):
    assert search_event_type_to_string(code) == "Unknown event type"