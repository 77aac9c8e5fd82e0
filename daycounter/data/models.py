"""
Canonical data models for calendar dates and weekly session patterns.

This module defines immutable value objects. A CalendarDate can only hold a
date that exists in the proleptic Gregorian calendar; weekdays are always
numbered Monday=0 .. Sunday=6.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import IntEnum

from ..errors import DateFormatError

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian leap rule, valid for year 0 and negative years."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def _days_before_year(year: int) -> int:
    # Floor division keeps this exact for years before 1
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


def _days_before_month(year: int, month: int) -> int:
    days = sum(_DAYS_IN_MONTH[:month - 1])
    if month > 2 and is_leap_year(year):
        days += 1
    return days


class Weekday(IntEnum):
    """ISO weekday numbering, Monday first."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def from_name(cls, name: str) -> "Weekday":
        """Look up a weekday by its English name, case-insensitive."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown weekday name: {name!r}") from None


@dataclass(frozen=True, order=True)
class CalendarDate:
    """
    Calendar date without time of day, ordered by (year, month, day).

    Any integer year is accepted, including year 0 and negative years, so
    arithmetic is done on day ordinals rather than through datetime.date.
    """
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        raw = f"{self.day}/{self.month}/{self.year}"
        for value in (self.year, self.month, self.day):
            if isinstance(value, bool) or not isinstance(value, int):
                raise DateFormatError(f"{raw} is not a calendar date: fields must be integers", raw_data=raw)
        if not 1 <= self.month <= 12:
            raise DateFormatError(f"{raw} is not a calendar date: month must be in 1..12", raw_data=raw)
        if not 1 <= self.day <= days_in_month(self.year, self.month):
            raise DateFormatError(f"{raw} is not a calendar date: day is out of range for month", raw_data=raw)

    def toordinal(self) -> int:
        """Day number with 01/01/0001 as day 1, same numbering as datetime.date."""
        return _days_before_year(self.year) + _days_before_month(self.year, self.month) + self.day

    def succ(self) -> "CalendarDate":
        """Next calendar day."""
        if self.day < days_in_month(self.year, self.month):
            return CalendarDate(self.year, self.month, self.day + 1)
        if self.month < 12:
            return CalendarDate(self.year, self.month + 1, 1)
        return CalendarDate(self.year + 1, 1, 1)

    @property
    def weekday(self) -> Weekday:
        # 01/01/0001 was a Monday
        return Weekday((self.toordinal() - 1) % 7)

    def _iso_thursday(self) -> int:
        """Ordinal of the Thursday in this date's ISO week."""
        return self.toordinal() - self.weekday + Weekday.THURSDAY

    @property
    def iso_year(self) -> int:
        """ISO-8601 week-numbering year, which differs from year around new year."""
        thursday = self._iso_thursday()
        if thursday <= _days_before_year(self.year):
            return self.year - 1
        if thursday > _days_before_year(self.year + 1):
            return self.year + 1
        return self.year

    @property
    def iso_week(self) -> int:
        """ISO-8601 week number, 1..53."""
        day_of_year = self._iso_thursday() - _days_before_year(self.iso_year) - 1
        return day_of_year // 7 + 1

    @property
    def key(self) -> str:
        """Canonical lookup key, independent of display format."""
        return f"{self.year:04}-{self.month:02}-{self.day:02}"

    def display(self) -> str:
        """Day and month zero-padded to two digits, year unpadded."""
        return f"{self.day:02}/{self.month:02}/{self.year}"

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True)
class WeekdayMask:
    """Sessions contributed by each weekday, indexed Monday=0 .. Sunday=6."""
    sessions: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.sessions) != len(Weekday):
            raise ValueError(
                f"Weekday mask needs {len(Weekday)} entries, got {len(self.sessions)}"
            )
        for value in self.sessions:
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"Session counts must be non-negative integers, got {value!r}")

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "WeekdayMask":
        """Build a mask from 7 values, Monday first."""
        return cls(tuple(values))

    @classmethod
    def from_mapping(cls, values: Mapping[str, int]) -> "WeekdayMask":
        """Build a mask from weekday names; missing weekdays contribute nothing."""
        sessions = [0] * len(Weekday)
        for name, count in values.items():
            sessions[Weekday.from_name(name)] = count
        return cls(tuple(sessions))

    def sessions_for(self, weekday: Weekday) -> int:
        return self.sessions[weekday]

    def is_included(self, weekday: Weekday) -> bool:
        return self.sessions[weekday] != 0

    @property
    def included_weekdays(self) -> list[Weekday]:
        return [day for day in Weekday if self.is_included(day)]
