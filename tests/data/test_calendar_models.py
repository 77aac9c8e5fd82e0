"""Tests for calendar value objects and the weekday mask."""

from datetime import date, timedelta

import pytest

from daycounter.data.models import CalendarDate, Weekday, WeekdayMask, days_in_month, is_leap_year
from daycounter.errors import DateFormatError


class TestCalendarDate:
    """Test suite for CalendarDate."""

    def test_valid_date(self) -> None:
        """A real date keeps its fields."""
        d = CalendarDate(2022, 9, 12)
        assert (d.year, d.month, d.day) == (2022, 9, 12)

    @pytest.mark.parametrize("year,month,day", [
        (2022, 2, 30),
        (2022, 4, 31),
        (2022, 13, 1),
        (2022, 0, 10),
        (2022, 5, 0),
        (2023, 2, 29),
        (-100, 2, 29),
    ])
    def test_impossible_dates_rejected(self, year: int, month: int, day: int) -> None:
        """Dates missing from the calendar cannot be constructed."""
        with pytest.raises(DateFormatError):
            CalendarDate(year, month, day)

    def test_leap_day(self) -> None:
        """29 February exists in leap years."""
        assert CalendarDate(2024, 2, 29).succ() == CalendarDate(2024, 3, 1)

    def test_succ_crosses_year(self) -> None:
        """Successor of 31 December is 1 January of the next year."""
        assert CalendarDate(2022, 12, 31).succ() == CalendarDate(2023, 1, 1)

    def test_ordering(self) -> None:
        """Dates are ordered by year, then month, then day."""
        assert CalendarDate(2022, 9, 12) < CalendarDate(2022, 9, 13)
        assert CalendarDate(2022, 12, 1) > CalendarDate(2022, 9, 30)
        assert CalendarDate(2021, 12, 31) < CalendarDate(2022, 1, 1)

    def test_weekday_is_monday_first(self) -> None:
        """12/09/2022 was a Monday, 18/09/2022 a Sunday."""
        assert CalendarDate(2022, 9, 12).weekday is Weekday.MONDAY
        assert CalendarDate(2022, 9, 18).weekday is Weekday.SUNDAY
        assert CalendarDate(2022, 9, 18).weekday == 6

    def test_iso_week(self) -> None:
        """ISO weeks start on Monday and week 1 holds the first Thursday."""
        assert CalendarDate(2022, 9, 12).iso_week == 37
        assert CalendarDate(2022, 9, 18).iso_week == 37
        assert CalendarDate(2022, 9, 19).iso_week == 38
        # 1 January 2021 belongs to week 53 of 2020
        assert CalendarDate(2021, 1, 1).iso_week == 53
        assert CalendarDate(2021, 1, 1).iso_year == 2020

    def test_key_and_display(self) -> None:
        """The lookup key is independent of the display format."""
        d = CalendarDate(2022, 9, 5)
        assert d.key == "2022-09-05"
        assert d.display() == "05/09/2022"
        assert str(d) == "05/09/2022"

    def test_display_year_unpadded(self) -> None:
        """Years are printed without padding."""
        assert CalendarDate(987, 3, 4).display() == "04/03/987"


class TestCalendarArithmetic:
    """Calendar rules outside the range of datetime.date."""

    @pytest.mark.parametrize("year,leap", [
        (2024, True), (2023, False), (1900, False), (2000, True),
        (0, True), (-4, True), (-100, False), (-400, True),
    ])
    def test_leap_years(self, year: int, leap: bool) -> None:
        """Leap years follow the proleptic Gregorian rule for any year."""
        assert is_leap_year(year) is leap
        assert days_in_month(year, 2) == (29 if leap else 28)

    def test_year_zero_and_negative_years(self) -> None:
        """Year 0 and negative years are ordinary calendar years."""
        assert CalendarDate(0, 2, 29).succ() == CalendarDate(0, 3, 1)
        assert CalendarDate(-1, 12, 31).succ() == CalendarDate(0, 1, 1)
        assert CalendarDate(-44, 3, 15) < CalendarDate(0, 1, 1)

    def test_years_beyond_9999(self) -> None:
        """Dates after 9999 keep counting."""
        assert CalendarDate(9999, 12, 31).succ() == CalendarDate(10000, 1, 1)
        assert CalendarDate(10000, 1, 1).key == "10000-01-01"

    def test_weekday_far_from_present(self) -> None:
        """01/01/0000 and 01/01/10000 fall on Saturday, as 01/01/2000 does."""
        assert CalendarDate(2000, 1, 1).weekday is Weekday.SATURDAY
        assert CalendarDate(0, 1, 1).weekday is Weekday.SATURDAY
        assert CalendarDate(10000, 1, 1).weekday is Weekday.SATURDAY

    def test_iso_week_repeats_every_400_years(self) -> None:
        """The Gregorian cycle repeats weekdays and ISO weeks every 400 years."""
        for offset in (-2400, -2000, 8000):
            d = CalendarDate(2021 + offset, 1, 1)
            assert d.iso_week == 53
            assert d.iso_year == 2020 + offset

    def test_matches_datetime_in_common_range(self) -> None:
        """Ordinal, weekday and ISO week agree with datetime.date day by day."""
        reference = date(2019, 12, 1)
        d = CalendarDate(2019, 12, 1)
        while reference <= date(2024, 1, 31):
            assert d.toordinal() == reference.toordinal()
            assert d.weekday == reference.weekday()
            assert (d.iso_year, d.iso_week) == tuple(reference.isocalendar())[:2]
            assert d.key == reference.isoformat()
            reference += timedelta(days=1)
            d = d.succ()


class TestWeekdayMask:
    """Test suite for WeekdayMask."""

    def test_from_sequence(self) -> None:
        """Sequence entries are indexed Monday first."""
        mask = WeekdayMask.from_sequence([1, 1, 0, 1, 1, 0, 0])
        assert mask.sessions_for(Weekday.MONDAY) == 1
        assert mask.sessions_for(Weekday.WEDNESDAY) == 0
        assert mask.included_weekdays == [
            Weekday.MONDAY, Weekday.TUESDAY, Weekday.THURSDAY, Weekday.FRIDAY
        ]

    def test_from_mapping(self) -> None:
        """Named weekdays map onto their index; missing ones are excluded."""
        mask = WeekdayMask.from_mapping({"Monday": 2, "sunday": 1})
        assert mask.sessions == (2, 0, 0, 0, 0, 0, 1)
        assert not mask.is_included(Weekday.TUESDAY)

    def test_unknown_weekday_name(self) -> None:
        """Unknown weekday names are rejected."""
        with pytest.raises(ValueError):
            WeekdayMask.from_mapping({"funday": 1})

    @pytest.mark.parametrize("values", [
        [1, 1, 1],
        [1, 1, 1, 1, 1, 1, 1, 1],
        [1, -1, 0, 0, 0, 0, 0],
        [1, 1.5, 0, 0, 0, 0, 0],
        [True, 0, 0, 0, 0, 0, 0],
    ])
    def test_invalid_masks(self, values: list) -> None:
        """Masks need seven non-negative integer counts."""
        with pytest.raises(ValueError):
            WeekdayMask.from_sequence(values)
