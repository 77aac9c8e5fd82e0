"""Default configuration parameters for the session counter."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ScheduleParams:
    """Date range, weekly pattern and exclusion list of a schedule."""
    # Range boundaries, day/month/year
    start_date: str = "12/09/2022"
    end_date: str = "10/12/2022"

    # Sessions per weekday, Monday first
    weekday_sessions: dict[str, int] = field(default_factory=lambda: {
        "monday": 1,
        "tuesday": 1,
        "wednesday": 0,
        "thursday": 1,
        "friday": 1,
        "saturday": 0,
        "sunday": 0,
    })

    # Relative paths resolve against the config directory
    exclude_file: str = "exclude.txt"


@dataclass(frozen=True)
class OutputParams:
    """Report output parameters."""
    format: str = "text"               # text, json


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "WARNING"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    schedule: ScheduleParams
    output: OutputParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        schedule=ScheduleParams(),
        output=OutputParams(),
        logging=LoggingParams(),
    )
