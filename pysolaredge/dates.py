# pySolarEdge - Date Formats
# -*- coding: utf-8 -*-
"""
 The SolarEdge APIs are not consistent about timestamps. Each field picks
 one of the formats below explicitly:

    DATE_TIME         2023-08-31 14:15:00         energy/power data points, request times
    DATE_TIME_T       2023-08-31T14:15:00         portal measurement data points
    DATE_TIME_OFFSET  2023-08-31T14:15:00+02:00   weather, sun times, data availability
    DATE              2023-08-31                  forecast days, request dates

 Only numeric directives are used, so parsing never depends on the locale.
"""

import enum
from datetime import date, datetime
from typing import Callable, Dict, NamedTuple, Optional, Union

from dateutil.parser import isoparse

# Used in place of unparsable timestamps in permissive contexts
DISTANT_PAST = datetime(1, 1, 1)


class DateFormat(enum.Enum):
    DATE_TIME = "yyyy-MM-dd HH:mm:ss"
    DATE_TIME_T = "yyyy-MM-dd'T'HH:mm:ss"
    DATE_TIME_OFFSET = "yyyy-MM-dd'T'HH:mm:ssxxx"
    DATE = "yyyy-MM-dd"


class DateCodec(NamedTuple):
    parse: Callable[[str], Union[datetime, date]]
    format: Callable[[Union[datetime, date]], str]


def _strptime(pattern: str):
    def parse(value: str) -> datetime:
        return datetime.strptime(value, pattern)
    return parse


def _parse_offset(value: str) -> datetime:
    parsed = isoparse(value)
    if parsed.tzinfo is None:
        raise ValueError(f"missing UTC offset in {value!r}")
    return parsed


def _parse_date(value: str) -> date:
    return datetime.strptime(value, "%Y-%m-%d").date()


def _format_offset(value: datetime) -> str:
    return value.isoformat(timespec="seconds")


def _strftime(pattern: str):
    # %Y is not zero padded below year 1000 on every platform
    def _format(value: Union[datetime, date]) -> str:
        return f"{value.year:04d}" + value.strftime(pattern)
    return _format


DATE_FORMATS: Dict[DateFormat, DateCodec] = {
    DateFormat.DATE_TIME: DateCodec(_strptime("%Y-%m-%d %H:%M:%S"),
                                    _strftime("-%m-%d %H:%M:%S")),
    DateFormat.DATE_TIME_T: DateCodec(_strptime("%Y-%m-%dT%H:%M:%S"),
                                      _strftime("-%m-%dT%H:%M:%S")),
    DateFormat.DATE_TIME_OFFSET: DateCodec(_parse_offset, _format_offset),
    DateFormat.DATE: DateCodec(_parse_date, _strftime("-%m-%d")),
}


def parse_date(value: str, fmt: DateFormat) -> Union[datetime, date]:
    """Parse `value` with `fmt`. Raises ValueError on mismatch."""
    if not isinstance(value, str):
        raise ValueError(f"expected a date string, got {type(value).__name__}")
    return DATE_FORMATS[fmt].parse(value)


def try_parse_date(value: str, fmt: DateFormat) -> Optional[Union[datetime, date]]:
    try:
        return parse_date(value, fmt)
    except (ValueError, OverflowError):
        return None


def format_date(value: Union[datetime, date], fmt: DateFormat) -> str:
    return DATE_FORMATS[fmt].format(value)
