import pytest

from services.clock_service import format_clock, parse_clock


@pytest.mark.parametrize("text, minutes", [
    ("00:00", 0),
    ("09:00", 540),
    ("12:33", 753),
    ("23:59", 1439),
])
def test_parse_clock(text, minutes):
    assert parse_clock(text) == minutes
    assert format_clock(minutes) == text


@pytest.mark.parametrize("text", ["9:00", "24:00", "12:60", "12-00", "", "12:5"])
def test_parse_clock_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_clock(text)


def test_format_clock_durations():
    assert format_clock(358) == "05:58"
    assert format_clock(0) == "00:00"
