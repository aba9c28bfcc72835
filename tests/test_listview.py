import pytest

from vitapkg.listview import ListCursor, SpeedMeter, format_speed, friendly_size


@pytest.mark.parametrize("size", [0, -1, -1000])
def test_friendly_size_empty_for_non_positive(size):
    assert friendly_size(size) == ""


def test_friendly_size_bytes():
    assert friendly_size(500) == "500 B"


def test_friendly_size_kilobytes():
    assert friendly_size(2048) == "2.00 KB"


@pytest.mark.parametrize(
    "size, unit",
    [(999, "B"), (1000, "KB"), (999_999, "KB"), (1_000_000, "MB"), (999_999_999, "MB"), (1_000_000_000, "GB")],
)
def test_friendly_size_unit_boundaries(size, unit):
    assert friendly_size(size).split(" ")[1] == unit


def test_format_speed_bytes():
    assert format_speed(512) == "512 B/s"
    assert format_speed(1000) == "1000 B/s"


@pytest.mark.parametrize("speed, suffix", [(1001, "KB/s"), (1000 * 1024, "KB/s"), (1000 * 1024 + 1, "MB/s")])
def test_format_speed_units(speed, suffix):
    assert format_speed(speed).endswith(" " + suffix)


def test_speed_meter_holds_value_within_a_second():
    meter = SpeedMeter()
    assert meter.sample(5000, 500) == 0
    first = meter.sample(4000, 2000)
    assert meter.sample(9_999_999, 2500) == first


def test_speed_meter_measures_window():
    meter = SpeedMeter()
    assert meter.sample(1000, 1000) == 1000
    assert meter.sample(1000, 2000) == 0


def test_down_moves_and_wraps():
    cursor = ListCursor(5)
    cursor.down(3)
    assert cursor.selected == 1
    cursor.down(3)
    cursor.down(3)
    assert (cursor.first, cursor.selected) == (0, 0)


def test_down_scrolls_past_page():
    cursor = ListCursor(2)
    for _ in range(3):
        cursor.down(10)
    assert cursor.first == 1
    assert cursor.selected == 3


def test_up_wraps_to_bottom():
    cursor = ListCursor(3)
    cursor.up(10)
    assert cursor.selected == 9
    assert cursor.first <= cursor.selected


def test_up_wraps_in_short_list():
    cursor = ListCursor(5)
    cursor.up(3)
    assert (cursor.first, cursor.selected) == (0, 2)


def test_up_scrolls_when_at_first_row():
    cursor = ListCursor(3)
    cursor.first = 4
    cursor.selected = 4
    cursor.up(20)
    assert (cursor.first, cursor.selected) == (3, 3)


def test_page_up_stops_at_top():
    cursor = ListCursor(5)
    cursor.first = 2
    cursor.selected = 3
    cursor.page_up()
    assert (cursor.first, cursor.selected) == (0, 0)


def test_page_down_then_up_round_trip():
    cursor = ListCursor(4)
    cursor.selected = 1
    cursor.page_down(100)
    assert (cursor.first, cursor.selected) == (4, 5)
    cursor.page_up()
    assert (cursor.first, cursor.selected) == (0, 1)


def test_page_down_clamps_selection():
    cursor = ListCursor(4)
    cursor.selected = 3
    cursor.page_down(6)
    assert cursor.selected == 5


def test_page_down_does_nothing_near_end():
    cursor = ListCursor(4)
    cursor.first = 2
    cursor.selected = 2
    cursor.page_down(6)
    assert (cursor.first, cursor.selected) == (2, 2)


def test_reposition_keeps_valid_cursor():
    cursor = ListCursor(4)
    cursor.first = 1
    cursor.selected = 2
    cursor.reposition(50)
    assert (cursor.first, cursor.selected) == (1, 2)


def test_reposition_resets_small_list():
    cursor = ListCursor(4)
    cursor.first = 10
    cursor.selected = 12
    cursor.reposition(3)
    assert (cursor.first, cursor.selected) == (0, 0)


def test_reposition_keeps_offset_in_large_list():
    cursor = ListCursor(4)
    cursor.first = 10
    cursor.selected = 12
    cursor.reposition(8)
    assert cursor.first == 8 - 4
    assert cursor.selected - cursor.first == 2


def test_empty_list_navigation_stays_at_top():
    cursor = ListCursor(4)
    cursor.up(0)
    cursor.down(0)
    cursor.page_down(0)
    assert (cursor.first, cursor.selected) == (0, 0)


def test_reset():
    cursor = ListCursor(4)
    cursor.first = 3
    cursor.selected = 5
    cursor.reset()
    assert (cursor.first, cursor.selected) == (0, 0)