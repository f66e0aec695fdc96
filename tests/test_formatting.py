from datetime import datetime, timedelta, timezone

import pytest

from bites.services import format_time_ago

NOW = datetime(2024, 1, 16, 12, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "age, expected",
    [
        (timedelta(seconds=30), "0m"),
        (timedelta(minutes=59, seconds=59), "59m"),
        (timedelta(hours=1), "1h"),
        (timedelta(hours=23, minutes=59), "23h"),
        (timedelta(days=1), "1d"),
        (timedelta(days=9, hours=5), "9d"),
    ],
)
def test_format_time_ago_buckets(age, expected):
    assert format_time_ago(NOW - age, now=NOW) == expected


def test_format_time_ago_clamps_future_timestamps():
    assert format_time_ago(NOW + timedelta(hours=2), now=NOW) == "0m"


def test_format_time_ago_treats_naive_values_as_utc():
    naive = datetime(2024, 1, 16, 9, 0)

    assert format_time_ago(naive, now=NOW) == "3h"
