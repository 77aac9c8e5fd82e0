"""
Command entry point: ``python -m daycounter``.

Reads config/schedule.yaml, counts sessions and prints the report. Any
invalid date or unreadable file aborts the run before anything is printed.
"""

import sys
from pathlib import Path
from typing import Optional

from .config.loader import ConfigLoader
from .delivery.stdout_delivery import StdoutReportDelivery
from .engine import SessionCounter
from .errors import ConfigurationError, DateFormatError, ExclusionFileError
from .logging.config import configure_logging, get_logger

logger = get_logger(__name__)


def main(config_dir: Optional[Path] = None) -> int:
    """Run a counting pass and return the process exit status."""
    configure_logging(level="WARNING")

    try:
        settings = ConfigLoader.create(config_dir).build_settings()
        configure_logging(
            level=settings.logging.level,
            format_json=settings.logging.format_json,
            include_timestamp=settings.logging.include_timestamp,
        )

        report = SessionCounter(settings).run()
    except (ConfigurationError, DateFormatError, ExclusionFileError) as e:
        logger.error(
            "Session count aborted",
            error_type=type(e).__name__,
            error=str(e),
            context=e.context,
        )
        print(f"daycounter: {e}", file=sys.stderr)
        return 1

    StdoutReportDelivery(settings.output).deliver(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
