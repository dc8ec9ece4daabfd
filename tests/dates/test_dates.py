"""
tests/dates/test_dates.py

Covers:
  - Coercion of datetimes, dates, strings and datetime64 values
  - Rejection of malformed and incomplete date strings
  - DD-MM-YYYY parsing and formatting
"""

from __future__ import annotations

from datetime import date, datetime, timezone

import numpy as np
import pytest

from datekit import InvalidDateError
from datekit._dates import as_utc, coerce_date, format_dmy, parse_dmy, to_datetime


class TestToDatetime:

    def test_datetime_passes_through(self):
        d = datetime(2024, 1, 2, 3, 4, 5)
        assert to_datetime(d) is d

    def test_date_becomes_midnight(self):
        assert to_datetime(date(2024, 1, 2)) == datetime(2024, 1, 2)

    def test_iso_with_zulu(self):
        assert to_datetime("2024-02-01T15:00:00.000Z") == datetime(
            2024, 2, 1, 15, tzinfo=timezone.utc
        )

    def test_iso_date_only_is_naive(self):
        assert to_datetime("2024-02-01") == datetime(2024, 2, 1)

    def test_free_form_string(self):
        assert as_utc("04 Dec 1995 00:12:00 UTC") == datetime(
            1995, 12, 4, 0, 12, tzinfo=timezone.utc
        )

    def test_numpy_datetime64(self):
        assert to_datetime(np.datetime64("2024-02-01T06:30")) == datetime(2024, 2, 1, 6, 30)

    def test_nat_raises(self):
        with pytest.raises(InvalidDateError):
            to_datetime(np.datetime64("NaT"))

    @pytest.mark.parametrize("text", ["not a date", "2024-13-45", ""])
    def test_malformed_string_raises(self, text):
        with pytest.raises(InvalidDateError):
            to_datetime(text)

    @pytest.mark.parametrize("text", ["Friday", "13", "Dec 4", "10:30"])
    def test_string_without_a_full_date_raises(self, text):
        # Missing fields must not be filled in from the current date.
        with pytest.raises(InvalidDateError):
            to_datetime(text)

    def test_free_form_string_is_repeatable(self):
        assert to_datetime("4 December 1995") == datetime(1995, 12, 4)
        assert to_datetime("4 December 1995") == to_datetime("4 December 1995")

    def test_malformed_string_is_a_value_error(self):
        with pytest.raises(ValueError):
            to_datetime("not a date")

    def test_unsupported_type_raises(self):
        with pytest.raises(TypeError):
            to_datetime(20240201)


class TestCoerceDate:

    def test_date_stays_date(self):
        d = date(2024, 1, 2)
        assert coerce_date(d) is d

    def test_string_becomes_datetime(self):
        assert coerce_date("2024-01-02") == datetime(2024, 1, 2)


class TestDayMonthYear:

    def test_parse(self):
        assert parse_dmy("05-01-2024") == date(2024, 1, 5)

    def test_format_pads(self):
        assert format_dmy(date(2024, 1, 5)) == "05-01-2024"

    @pytest.mark.parametrize("text", ["2024-01-05", "32-01-2024", "05/01/2024"])
    def test_parse_rejects_other_layouts(self, text):
        with pytest.raises(InvalidDateError):
            parse_dmy(text)
