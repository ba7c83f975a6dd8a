from __future__ import annotations

from datetime import date, time, timedelta

import pytest

from venture_booking.utils.date_utils import (
    DateUtilsError,
    count_nights,
    iter_nights,
    parse_time,
    today_in,
    weekday_name,
)
from venture_booking.utils.string_utils import generate_booking_reference, to_base36


def test_iter_nights_is_half_open():
    nights = list(iter_nights(date(2030, 1, 1), date(2030, 1, 4)))
    assert nights == [date(2030, 1, 1), date(2030, 1, 2), date(2030, 1, 3)]


def test_iter_nights_empty_when_end_not_after_start():
    assert list(iter_nights(date(2030, 1, 4), date(2030, 1, 4))) == []
    assert list(iter_nights(date(2030, 1, 5), date(2030, 1, 4))) == []


def test_count_nights_for_dates_only():
    assert count_nights(date(2030, 1, 1), date(2030, 1, 4)) == 3


def test_count_nights_rounds_partial_days_up():
    # 22:00 to 06:00 next day is a single short-stay night
    assert count_nights(date(2030, 1, 1), date(2030, 1, 2), time(22, 0), time(6, 0)) == 1
    # 10:00 to 15:00 two days later spans more than two days
    assert count_nights(date(2030, 1, 1), date(2030, 1, 3), time(10, 0), time(15, 0)) == 3


def test_count_nights_zero_for_non_positive_span():
    assert count_nights(date(2030, 1, 2), date(2030, 1, 1)) == 0


def test_weekday_name():
    assert weekday_name(date(2030, 1, 7)) == "Monday"
    assert weekday_name(date(2030, 1, 12)) == "Saturday"


def test_parse_time_rejects_garbage():
    assert parse_time("14:00:00") == time(14, 0)
    with pytest.raises(DateUtilsError):
        parse_time("2pm")


def test_today_in_unknown_timezone():
    with pytest.raises(DateUtilsError):
        today_in("Mars/Olympus_Mons")


def test_today_in_is_close_to_utc_today():
    assert abs(today_in("Asia/Manila") - date.today()) <= timedelta(days=1)


def test_to_base36():
    assert to_base36(0) == "0"
    assert to_base36(35) == "Z"
    assert to_base36(36) == "10"
    with pytest.raises(ValueError):
        to_base36(-1)


def test_booking_reference_format():
    reference = generate_booking_reference("bk")
    prefix, stamp, suffix = reference.split("-")
    assert prefix == "BK"
    assert len(suffix) == 4
    assert reference == reference.upper()
    assert int(stamp, 36) > 0
