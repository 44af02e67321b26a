"""
DateTime Parser Utility
Shared utility for parsing dates from query parameters and request bodies
"""
from datetime import datetime, date, time, timedelta, timezone
from typing import Any, Tuple

from domain.exceptions import InvalidDateTimeException


class DateTimeParser:
    """Parse dates/timestamps coming from the API and from storage"""

    @staticmethod
    def parse_date(value: Any, param_name: str = "date") -> date:
        """
        Parse a calendar date

        Accepts date/datetime objects, "YYYY-MM-DD" or a full ISO datetime
        (the date part is kept, e.g. "2025-01-10T00:00:00.000Z").

        Raises:
            InvalidDateTimeException: If the value cannot be parsed

        Examples:
            >>> DateTimeParser.parse_date("2025-11-25")
            datetime.date(2025, 11, 25)
        """
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value

        try:
            text = str(value).strip()
            if 'T' in text:
                return DateTimeParser.parse_timestamp(text).date()
            return datetime.strptime(text, "%Y-%m-%d").date()
        except (ValueError, InvalidDateTimeException) as e:
            raise InvalidDateTimeException(
                f"Invalid {param_name} format. Use YYYY-MM-DD. Error: {str(e)}",
                details={param_name: value}
            )

    @staticmethod
    def parse_timestamp(value: Any) -> datetime:
        """
        Parse an ISO-8601 timestamp into a timezone-aware datetime

        Naive values are assumed to be UTC; a trailing "Z" is accepted.

        Raises:
            InvalidDateTimeException: If the value cannot be parsed
        """
        if isinstance(value, datetime):
            parsed = value
        else:
            text = str(value).strip()
            if text.endswith('Z'):
                text = text[:-1] + '+00:00'
            try:
                parsed = datetime.fromisoformat(text)
            except ValueError as e:
                raise InvalidDateTimeException(
                    f"Invalid timestamp format: {value}",
                    details={"timestamp": value, "error": str(e)}
                )

        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

    @staticmethod
    def parse_date_range(start_value: Any, end_value: Any) -> Tuple[date, date]:
        """
        Parse startDate/endDate and check their order

        Raises:
            InvalidDateTimeException: If a date is invalid or start > end
        """
        start_date = DateTimeParser.parse_date(start_value, "startDate")
        end_date = DateTimeParser.parse_date(end_value, "endDate")

        if start_date > end_date:
            raise InvalidDateTimeException(
                "startDate must be on or before endDate",
                details={"startDate": start_date.isoformat(), "endDate": end_date.isoformat()}
            )
        return start_date, end_date

    @staticmethod
    def to_unix_range(start_date: date, end_date: date) -> Tuple[int, int]:
        """
        Convert an inclusive date range to Unix seconds (UTC)

        Returns:
            (start of start_date, last second of end_date)
        """
        start_dt = datetime.combine(start_date, time.min, tzinfo=timezone.utc)
        end_dt = datetime.combine(end_date + timedelta(days=1), time.min, tzinfo=timezone.utc)
        return int(start_dt.timestamp()), int(end_dt.timestamp()) - 1
