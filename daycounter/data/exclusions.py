"""
Loader for the exclusion file.

The file lists one day/month/year date per line. Each date is stored under
its canonical key so lookups do not depend on zero-padding in the file.
"""

from pathlib import Path
from typing import Union

import structlog

from ..errors import DateFormatError, ExclusionFileError
from .parsers import parse_date

logger = structlog.get_logger(__name__)


def load_exclusions(path: Union[str, Path]) -> frozenset[str]:
    """
    Load excluded dates from a newline-delimited file.

    Every line must hold a date, blank lines included; only the line
    ending is removed. Repeated dates are kept once.

    Args:
        path: Exclusion file location

    Returns:
        Canonical keys of every excluded date

    Raises:
        ExclusionFileError: if the file cannot be opened or read
        DateFormatError: on the first line that is not a valid date
    """
    path = Path(path)
    keys: set[str] = set()

    try:
        with open(path, encoding="utf-8") as f:
            for line_no, line in enumerate(f, start=1):
                token = line.rstrip("\r\n")

                try:
                    excluded = parse_date(token)
                except DateFormatError as e:
                    e.context.update({"path": str(path), "line": line_no})
                    logger.error(
                        "Invalid date in exclusion file",
                        path=str(path),
                        line=line_no,
                        raw=token,
                    )
                    raise

                if excluded.key in keys:
                    logger.debug("Duplicate excluded date", path=str(path), line=line_no, date=excluded.key)
                keys.add(excluded.key)
    except (OSError, UnicodeDecodeError) as e:
        raise ExclusionFileError(
            f"Cannot read exclusion file {path}: {e}",
            operation="read",
            target=str(path),
        ) from e

    logger.info("Exclusion file loaded", path=str(path), excluded_dates=len(keys))
    return frozenset(keys)
