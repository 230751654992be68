from datetime import datetime

import pytest

from ridegenie.utils.traffic import describe_traffic, format_clock, format_weekday, is_rush_hour


@pytest.mark.parametrize("moment, expected", [
    (datetime(2024, 12, 2, 9, 15), True),     # Monday morning commute
    (datetime(2024, 12, 4, 18, 0), True),     # Wednesday evening
    (datetime(2024, 12, 4, 20, 59), True),
    (datetime(2024, 12, 4, 21, 0), False),
    (datetime(2024, 12, 4, 7, 59), False),
    (datetime(2024, 12, 4, 14, 30), False),
    (datetime(2024, 12, 7, 9, 15), False),    # Saturday
    (datetime(2024, 12, 8, 18, 0), False),    # Sunday
])
def test_rush_hour_windows(moment, expected):
    assert is_rush_hour(moment) is expected


def test_clock_and_weekday_format():
    moment = datetime(2024, 12, 2, 18, 5)
    assert format_clock(moment) == "06:05 PM"
    assert format_weekday(moment) == "Monday"


def test_traffic_description_changes_with_rush_hour():
    assert "RUSH HOUR" in describe_traffic(datetime(2024, 12, 2, 9, 0))
    assert "Normal traffic" in describe_traffic(datetime(2024, 12, 2, 13, 0))
