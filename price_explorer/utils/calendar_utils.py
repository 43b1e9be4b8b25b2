"""
Calendar classification of price timestamps.

All classifiers work on `TimestampParts`, produced once per timestamp by
`parse_timestamp`. The parts are read from the wall-clock time written in
the string, so the hour and the day of week always belong to the embedded
UTC offset rather than to the timezone of the machine running the code.

Accepted timestamp shapes:
    - "2024-12-01 00:00:00-08:00" (dataset format)
    - "2024-12-01 00:00:00" (no offset)
    - "2024-12-01T00:00" (ISO separator)
    - "2024-12-01" (date only, hour 0)
"""

from datetime import datetime
from typing import Union

from ..exceptions import InvalidTimestampError, InvariantViolationError
from ..models import Sample, TimestampParts

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

TimestampLike = Union[str, TimestampParts, Sample]


def parse_timestamp(text: str) -> TimestampParts:
    """
    Parse a timestamp string into its calendar parts.

    Args:
        text: Timestamp such as "2024-12-01 00:00:00-08:00"

    Returns:
        TimestampParts with date, hour, minute, weekday and UTC offset

    Raises:
        InvalidTimestampError: If the string is not a recognisable timestamp
    """
    if not isinstance(text, str) or not text.strip():
        raise InvalidTimestampError(f"Invalid timestamp: {text!r}")

    try:
        moment = datetime.fromisoformat(text.strip())
    except ValueError as e:
        raise InvalidTimestampError(f"Invalid timestamp: {text!r}") from e

    offset = moment.utcoffset()
    return TimestampParts(
        local_date=moment.date(),
        hour=moment.hour,
        minute=moment.minute,
        weekday=moment.weekday(),
        utc_offset_minutes=None if offset is None else int(
            offset.total_seconds() // 60)
    )


def make_sample(timestamp: str, price: float) -> Sample:
    """Build a Sample, parsing its timestamp once."""
    return Sample(timestamp=timestamp, price=float(price),
                  parts=parse_timestamp(timestamp))


def _parts(value: TimestampLike) -> TimestampParts:
    if isinstance(value, TimestampParts):
        return value
    if isinstance(value, Sample):
        return value.parts
    return parse_timestamp(value)


def year_month_key(value: TimestampLike) -> str:
    """Get the "YYYY-MM" grouping key of a timestamp."""
    parts = _parts(value)
    return f"{parts.local_date.year:04d}-{parts.local_date.month:02d}"


def date_key(value: TimestampLike) -> str:
    """Get the "YYYY-MM-DD" calendar date of a timestamp."""
    return _parts(value).local_date.isoformat()


def month_label(key: str) -> str:
    """
    Convert a "YYYY-MM" key into a display label such as "December 2024".

    Raises:
        InvariantViolationError: If the key does not hold a month 1..12
    """
    try:
        year, month = key.split("-")
        month_number = int(month)
    except (AttributeError, ValueError) as e:
        raise InvariantViolationError(f"Invalid year-month key: {key!r}") from e

    if not 1 <= month_number <= 12:
        raise InvariantViolationError(f"Invalid month in key: {key!r}")

    return f"{MONTH_NAMES[month_number - 1]} {year}"


def hour_of_day(value: TimestampLike) -> int:
    """Get the hour of day (0-23) of a timestamp."""
    return _parts(value).hour


def is_weekday(value: TimestampLike) -> bool:
    """Check whether a timestamp falls on Monday..Friday."""
    return _parts(value).weekday < 5
