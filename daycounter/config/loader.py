"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import structlog
import yaml

from ..data.models import CalendarDate, WeekdayMask
from ..data.parsers import parse_date
from ..errors import ConfigurationError
from .defaults import DefaultConfig, LoggingParams, OutputParams, get_default_config
from .validation import ConfigValidator

logger = structlog.get_logger(__name__)

CONFIG_FILENAME = "schedule.yaml"


@dataclass(frozen=True)
class Settings:
    """Validated configuration for a single counting run."""
    start_date: CalendarDate
    end_date: CalendarDate
    weekday_mask: WeekdayMask
    exclude_file: Path
    output: OutputParams
    logging: LoggingParams


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load site configuration from schedule.yaml, empty if absent."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        try:
            with open(config_file, encoding="utf-8") as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Cannot load configuration file {config_file}: {e}",
                context={"path": str(config_file)},
            ) from e

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"Configuration file {config_file} must contain a mapping",
                context={"path": str(config_file)},
            )
        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. config/schedule.yaml
        3. Global defaults (lowest priority)
        """
        # Start with global defaults
        config = self._dataclass_to_dict(self.defaults)

        # Apply file configuration
        config = self._deep_merge(config, self.load_file_config())

        # Apply explicit overrides
        if overrides:
            config = self._deep_merge(config, overrides)

        for section in ("schedule", "output", "logging"):
            if not isinstance(config.get(section), dict):
                raise ConfigurationError(
                    f"Configuration section '{section}' must be a mapping",
                    context={"section": section},
                )

        return config

    def build_settings(self, overrides: Optional[dict[str, Any]] = None) -> Settings:
        """
        Merge, validate and convert configuration into run settings.

        Raises:
            ConfigurationError: if any configuration value is invalid
        """
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            raise ConfigurationError(
                "Invalid configuration: " + "; ".join(error_msgs),
                errors=errors,
            )

        schedule = config["schedule"]
        sessions = schedule["weekday_sessions"]
        if isinstance(sessions, dict):
            mask = WeekdayMask.from_mapping(sessions)
        else:
            mask = WeekdayMask.from_sequence(sessions)

        exclude_file = Path(schedule["exclude_file"]).expanduser()
        if not exclude_file.is_absolute():
            exclude_file = self.config_dir / exclude_file

        settings = Settings(
            start_date=parse_date(schedule["start_date"]),
            end_date=parse_date(schedule["end_date"]),
            weekday_mask=mask,
            exclude_file=exclude_file,
            output=self._section(OutputParams, config["output"]),
            logging=self._section(LoggingParams, config["logging"]),
        )

        logger.debug(
            "Configuration loaded",
            config_dir=str(self.config_dir),
            start_date=schedule["start_date"],
            end_date=schedule["end_date"],
            weekday_sessions=list(mask.sessions),
            exclude_file=str(exclude_file),
        )
        return settings

    def _section(self, params_cls: type, values: dict[str, Any]) -> Any:
        """Build a parameter dataclass from the keys it knows about."""
        known = {f.name for f in fields(params_cls)}
        return params_cls(**{k: v for k, v in values.items() if k in known})

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                elif isinstance(value, dict):
                    result[field_name] = dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
