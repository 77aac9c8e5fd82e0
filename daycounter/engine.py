"""
Session counting engine.

Walks the configured date range once, counting the distinct ISO weeks it
spans and the sessions that fall on included, non-excluded weekdays.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .config.loader import ConfigLoader, Settings
from .data.exclusions import load_exclusions
from .data.models import CalendarDate, WeekdayMask
from .data.ranges import DateRange
from .logging.config import get_engine_logger, log_run_summary

engine_logger = get_engine_logger(__name__)

# Never a real ISO week number
NO_WEEK = 0


@dataclass(frozen=True)
class SessionDay:
    """A date that contributes sessions to the total."""
    date: CalendarDate
    sessions: int


@dataclass(frozen=True)
class SessionReport:
    """Outcome of a counting run."""
    start_date: CalendarDate
    end_date: CalendarDate
    days: tuple[SessionDay, ...] = field(default_factory=tuple)
    sessions_total: int = 0
    week_count: int = 0

    @property
    def dates(self) -> list[CalendarDate]:
        return [day.date for day in self.days]


class SessionCounter:
    """
    Main coordinator for a counting run.

    Manages the pipeline:
    Settings → Exclusion Set → Date Range → Week/Mask/Exclusion filtering → Report
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.logger = engine_logger

    @classmethod
    def from_config(cls, config_dir: Optional[Path] = None) -> "SessionCounter":
        """Create a counter from the configuration directory."""
        return cls(ConfigLoader.create(config_dir).build_settings())

    @property
    def weekday_mask(self) -> WeekdayMask:
        return self.settings.weekday_mask

    def run(self) -> SessionReport:
        """
        Load the exclusion file and count sessions over the configured range.

        Raises:
            ExclusionFileError: if the exclusion file cannot be read
            DateFormatError: if the exclusion file holds an invalid date
        """
        exclusions = load_exclusions(self.settings.exclude_file)
        return self.count(exclusions)

    def count(self, exclusions: frozenset[str] = frozenset()) -> SessionReport:
        """Count sessions over the configured range against the given exclusion keys."""
        start = self.settings.start_date
        end = self.settings.end_date
        mask = self.weekday_mask

        if start > end:
            self.logger.warning(
                "Start date is after end date, range is empty",
                start_date=start.display(),
                end_date=end.display(),
            )

        days: list[SessionDay] = []
        sessions_total = 0
        week_count = 0
        last_week = NO_WEEK

        for current in DateRange(start, end):
            # Weeks are counted before any filtering
            week = current.iso_week
            if week != last_week:
                last_week = week
                week_count += 1

            sessions = mask.sessions_for(current.weekday)
            if sessions == 0:
                continue

            if current.key in exclusions:
                self.logger.debug("Excluded date skipped", date=current.display())
                continue

            sessions_total += sessions
            days.append(SessionDay(date=current, sessions=sessions))

        report = SessionReport(
            start_date=start,
            end_date=end,
            days=tuple(days),
            sessions_total=sessions_total,
            week_count=week_count,
        )

        log_run_summary(
            self.logger,
            start_date=start.display(),
            end_date=end.display(),
            sessions_total=sessions_total,
            week_count=week_count,
            context={"excluded_dates": len(exclusions), "session_days": len(days)},
        )
        return report
