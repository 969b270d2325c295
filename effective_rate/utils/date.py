import calendar
from typing import Union
from datetime import datetime, date

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta
from pandas import NaT, Timestamp

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[str, date, datetime, Timestamp]


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, datetime or pandas Timestamp to a plain date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' strings, then anything dateutil can parse.
    """
    if date_like is NaT:
        raise ValueError("Missing date (NaT)")
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like, fmt).date()
            except ValueError:
                continue
        try:
            return date_parser.parse(date_like).date()
        except (ValueError, OverflowError) as exc:
            raise ValueError(f"Unsupported date string format: {date_like!r}") from exc
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def is_leap_year(date_like: DateLike) -> bool:
    return calendar.isleap(to_date(date_like).year)


def days_in_year(date_like: DateLike) -> int:
    """
    366 for dates in a leap year, 365 otherwise.
    """
    return 366 if is_leap_year(date_like) else 365


def day_of_year(date_like: DateLike) -> int:
    """
    Zero-based day index within the date's own year (Jan 1 is day 0).
    """
    dt = to_date(date_like)
    return (dt - date(dt.year, 1, 1)).days


def year_fraction(date_like: DateLike) -> float:
    """
    Elapsed share of the date's year: day_of_year / days_in_year, in [0, 1).
    """
    return day_of_year(date_like) / days_in_year(date_like)


def year_offset(start: DateLike, end: DateLike) -> float:
    """
    Years from 'start' to 'end', each date measured against its own year's length:
        (y_end - y_start) + (year_fraction(end) - year_fraction(start))
    so the basis switches between 365 and 366 at a leap-year boundary.
    """
    first, second = to_date(start), to_date(end)
    return (second.year - first.year) + (year_fraction(second) - year_fraction(first))


def month_starts(start: DateLike, count: int) -> list:
    """
    First-of-month dates beginning with the month of 'start', 'count' entries long.
    """
    base = to_date(start).replace(day=1)
    return [base + relativedelta(months=k) for k in range(count)]
