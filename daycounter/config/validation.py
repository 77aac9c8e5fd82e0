"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from ..data.models import Weekday
from ..data.parsers import parse_date
from ..errors import DateFormatError

OUTPUT_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_session_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_schedule_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate schedule parameters."""
        errors = []

        # Validate range boundaries
        for name in ("start_date", "end_date"):
            if name not in params:
                continue
            value = params[name]
            if not isinstance(value, str):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a day/month/year string",
                    value=value
                ))
                continue
            try:
                parse_date(value)
            except DateFormatError as e:
                errors.append(ValidationError(
                    field=name,
                    message=str(e),
                    value=value
                ))

        # Validate weekday_sessions
        if "weekday_sessions" in params:
            value = params["weekday_sessions"]
            if isinstance(value, dict):
                for name, count in value.items():
                    if not isinstance(name, str) or name.strip().upper() not in Weekday.__members__:
                        errors.append(ValidationError(
                            field="weekday_sessions",
                            message="Keys must be weekday names (monday..sunday)",
                            value=name
                        ))
                    elif not _is_session_count(count):
                        errors.append(ValidationError(
                            field=f"weekday_sessions.{name}",
                            message="Must be a non-negative integer",
                            value=count
                        ))
            elif isinstance(value, list):
                if len(value) != len(Weekday):
                    errors.append(ValidationError(
                        field="weekday_sessions",
                        message="Must have exactly 7 entries, Monday first",
                        value=value
                    ))
                elif not all(_is_session_count(count) for count in value):
                    errors.append(ValidationError(
                        field="weekday_sessions",
                        message="Entries must be non-negative integers",
                        value=value
                    ))
            else:
                errors.append(ValidationError(
                    field="weekday_sessions",
                    message="Must be a mapping of weekday names or a list of 7 counts",
                    value=value
                ))

        # Validate exclude_file
        if "exclude_file" in params:
            value = params["exclude_file"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="exclude_file",
                    message="Must be a non-empty path",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_output_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate output parameters."""
        errors = []

        if "format" in params and params["format"] not in OUTPUT_FORMATS:
            errors.append(ValidationError(
                field="format",
                message=f"Must be one of: {', '.join(OUTPUT_FORMATS)}",
                value=params["format"]
            ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of: {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        for name in ("format_json", "include_timestamp"):
            if name in params and not isinstance(params[name], bool):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a boolean",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "schedule" in config:
            errors.extend(ConfigValidator.validate_schedule_params(config["schedule"]))

        if "output" in config:
            errors.extend(ConfigValidator.validate_output_params(config["output"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
