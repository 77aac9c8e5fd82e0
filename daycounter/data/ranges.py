"""Inclusive, forward-only ranges of calendar dates."""

from collections.abc import Iterator

from .models import CalendarDate


def iter_dates(start: CalendarDate, end: CalendarDate) -> Iterator[CalendarDate]:
    """Yield every date from start to end inclusive; nothing if start > end."""
    current = start
    while current <= end:
        yield current
        current = current.succ()


class DateRange:
    """
    Inclusive range of consecutive calendar dates.

    Each iteration starts over from ``start``; the range itself holds no
    cursor state.
    """

    def __init__(self, start: CalendarDate, end: CalendarDate) -> None:
        self.start = start
        self.end = end

    def __iter__(self) -> Iterator[CalendarDate]:
        return iter_dates(self.start, self.end)

    def __len__(self) -> int:
        if self.start > self.end:
            return 0
        return self.end.toordinal() - self.start.toordinal() + 1

    def __repr__(self) -> str:
        return f"DateRange({self.start}, {self.end})"
