"""
Testes Unitários - DateTimeParser
"""
from datetime import date, datetime, timezone, timedelta

import pytest

from shared.utils.datetime_parser import DateTimeParser
from domain.exceptions import InvalidDateTimeException


class TestParseDate:
    """Testes para DateTimeParser.parse_date"""

    def test_plain_date(self):
        assert DateTimeParser.parse_date("2025-11-25") == date(2025, 11, 25)

    def test_iso_datetime_keeps_date_part(self):
        assert DateTimeParser.parse_date("2025-01-10T00:00:00.000Z") == date(2025, 1, 10)

    def test_date_and_datetime_objects(self):
        assert DateTimeParser.parse_date(date(2025, 1, 1)) == date(2025, 1, 1)
        assert DateTimeParser.parse_date(datetime(2025, 1, 1, 15)) == date(2025, 1, 1)

    @pytest.mark.parametrize("value", ["25/11/2025", "2025-13-01", "", None, "yesterday"])
    def test_invalid_values(self, value):
        with pytest.raises(InvalidDateTimeException) as exc_info:
            DateTimeParser.parse_date(value, "startDate")

        assert "startDate" in exc_info.value.message
        assert exc_info.value.details == {"startDate": value}


class TestParseTimestamp:

    def test_zulu_suffix(self):
        assert DateTimeParser.parse_timestamp("2025-01-10T12:00:00Z") == \
            datetime(2025, 1, 10, 12, tzinfo=timezone.utc)

    def test_naive_is_utc(self):
        assert DateTimeParser.parse_timestamp("2025-01-10T12:00:00").tzinfo == timezone.utc

    def test_offset_preserved(self):
        parsed = DateTimeParser.parse_timestamp("2025-01-10T09:00:00-03:00")

        assert parsed.utcoffset() == timedelta(hours=-3)

    def test_invalid(self):
        with pytest.raises(InvalidDateTimeException):
            DateTimeParser.parse_timestamp("not a timestamp")


class TestDateRange:

    def test_parse_range(self):
        assert DateTimeParser.parse_date_range("2025-01-01", "2025-01-03") == \
            (date(2025, 1, 1), date(2025, 1, 3))

    def test_same_day_range(self):
        start, end = DateTimeParser.parse_date_range("2025-01-01", "2025-01-01")

        assert start == end

    def test_start_after_end(self):
        with pytest.raises(InvalidDateTimeException):
            DateTimeParser.parse_date_range("2025-01-05", "2025-01-01")

    def test_unix_range_covers_whole_end_date(self):
        start, end = DateTimeParser.to_unix_range(date(2025, 1, 1), date(2025, 1, 2))

        assert start == int(datetime(2025, 1, 1, tzinfo=timezone.utc).timestamp())
        assert end == int(datetime(2025, 1, 2, 23, 59, 59, tzinfo=timezone.utc).timestamp())
