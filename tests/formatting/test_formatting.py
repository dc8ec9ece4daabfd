from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from datekit.formatting import (
    WEEKDAY_NAMES,
    date_to_timestamp,
    day_name,
    format_date,
    time_of_day,
)


# ── Timestamps ────────────────────────────────────────────────────────────────

class TestDateToTimestamp:

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("01 Jan 1970 00:00:00 UTC", 0),
            ("04 Dec 1995 00:12:00 UTC", 818035920000),
            ("2024-02-01T00:00:00.000Z", 1706745600000),
            ("1970-01-01T00:00:00.123Z", 123),
        ],
    )
    def test_strings(self, value, expected):
        assert date_to_timestamp(value) == expected

    def test_before_epoch_is_negative(self):
        assert date_to_timestamp("1969-12-31T23:59:59Z") == -1000

    def test_naive_counts_as_utc(self):
        assert date_to_timestamp(datetime(1970, 1, 2)) == 86_400_000

    def test_offset_is_honoured(self):
        d = datetime(1970, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=1)))
        assert date_to_timestamp(d) == 0


# ── Time of day ───────────────────────────────────────────────────────────────

class TestTimeOfDay:

    def test_padded(self):
        assert time_of_day(datetime(2023, 6, 1, 8, 20, 55)) == "08:20:55"

    def test_late_evening(self):
        assert time_of_day(datetime(2015, 11, 20, 23, 15, 1)) == "23:15:01"

    def test_plain_date_is_midnight(self):
        assert time_of_day(date(2024, 1, 1)) == "00:00:00"

    def test_repeatable(self):
        d = datetime(2015, 11, 20, 23, 15, 1)
        assert time_of_day(d) == time_of_day(d)


# ── Weekday names ─────────────────────────────────────────────────────────────

class TestDayName:

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("01 Jan 1970 00:00:00 UTC", "Thursday"),
            ("03 Dec 1995 00:12:00 UTC", "Sunday"),
            ("2024-01-30T00:00:00.000Z", "Tuesday"),
            (date(2024, 2, 3), "Saturday"),
        ],
    )
    def test_known_days(self, value, expected):
        assert day_name(value) == expected

    def test_aware_value_uses_utc_day(self):
        # 01:00 on Tuesday at UTC+2 is still Monday in UTC.
        d = datetime(2024, 1, 30, 1, 0, tzinfo=timezone(timedelta(hours=2)))
        assert day_name(d) == "Monday"

    def test_name_table_is_sunday_first(self):
        assert WEEKDAY_NAMES[0] == "Sunday"
        assert WEEKDAY_NAMES[6] == "Saturday"
        assert len(WEEKDAY_NAMES) == 7


# ── Composite format ──────────────────────────────────────────────────────────

class TestFormatDate:

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2024-02-01T15:00:00.000Z", "2/1/2024, 3:00:00 PM"),
            ("1999-01-05T02:20:00.000Z", "1/5/1999, 2:20:00 AM"),
            ("2010-12-15T22:59:00.000Z", "12/15/2010, 10:59:00 PM"),
            ("2024-07-04T12:05:09.000Z", "7/4/2024, 12:05:09 PM"),
            ("2024-07-04T00:00:00.000Z", "7/4/2024, 12:00:00 AM"),
        ],
    )
    def test_known_values(self, value, expected):
        assert format_date(value) == expected

    def test_aware_value_uses_utc_fields(self):
        d = datetime(2024, 1, 1, 1, 30, tzinfo=timezone(timedelta(hours=3)))
        assert format_date(d) == "12/31/2023, 10:30:00 PM"
