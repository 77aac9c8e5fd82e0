"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Callable, Optional, Sequence

import pytest

from daycounter.config.defaults import LoggingParams, OutputParams
from daycounter.config.loader import Settings
from daycounter.data.models import WeekdayMask
from daycounter.data.parsers import parse_date
from daycounter.logging.config import configure_logging

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Monday, Tuesday, Thursday and Friday, one session each
REFERENCE_SESSIONS = (1, 1, 0, 1, 1, 0, 0)


@pytest.fixture(autouse=True)
def quiet_logging() -> None:
    """Keep log records on stderr and below the noise floor."""
    configure_logging(level="WARNING", include_timestamp=False)


@pytest.fixture
def reference_output() -> str:
    """Report of the 12/09/2022 - 10/12/2022 run with no exclusions."""
    return (FIXTURES_DIR / "autumn_2022_expected.txt").read_text(encoding="utf-8")


@pytest.fixture
def exclude_file(tmp_path: Path) -> Path:
    """Empty exclusion file."""
    path = tmp_path / "exclude.txt"
    path.write_text("", encoding="utf-8")
    return path


@pytest.fixture
def make_settings(exclude_file: Path) -> Callable[..., Settings]:
    """Factory for run settings, defaulting to the reference schedule."""

    def _make(
        start: str = "12/09/2022",
        end: str = "10/12/2022",
        sessions: Sequence[int] = REFERENCE_SESSIONS,
        exclude: Optional[Path] = None,
        output_format: str = "text",
    ) -> Settings:
        return Settings(
            start_date=parse_date(start),
            end_date=parse_date(end),
            weekday_mask=WeekdayMask.from_sequence(sessions),
            exclude_file=exclude if exclude is not None else exclude_file,
            output=OutputParams(format=output_format),
            logging=LoggingParams(),
        )

    return _make


@pytest.fixture
def config_dir(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing schedule.yaml and exclude.txt into a fresh directory."""

    def _write(schedule_yaml: str, excluded: Optional[str] = "") -> Path:
        directory = tmp_path / "config"
        directory.mkdir(exist_ok=True)
        (directory / "schedule.yaml").write_text(schedule_yaml, encoding="utf-8")
        if excluded is not None:
            (directory / "exclude.txt").write_text(excluded, encoding="utf-8")
        return directory

    return _write
