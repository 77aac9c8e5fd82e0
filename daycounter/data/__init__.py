"""
Date handling for the session counter.

Calendar values and the weekly session pattern, the day/month/year parser,
the exclusion file loader and the inclusive date range.
"""
from .exclusions import load_exclusions
from .models import CalendarDate, Weekday, WeekdayMask
from .parsers import parse_date, parse_date_parts
from .ranges import DateRange, iter_dates

__all__ = [
    "CalendarDate",
    "DateRange",
    "Weekday",
    "WeekdayMask",
    "iter_dates",
    "load_exclusions",
    "parse_date",
    "parse_date_parts",
]
