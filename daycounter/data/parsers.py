"""
Parsers for day/month/year date tokens.

Tokens are read positionally as day, month, year (European order). The same
format is used for range boundaries in configuration and for every line of
the exclusion file.
"""

import re

from ..errors import DateFormatError
from .models import CalendarDate

DATE_SEPARATOR = "/"

_UNSIGNED = re.compile(r"\+?[0-9]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")


def _parse_field(raw: str, pattern: re.Pattern, token: str, name: str) -> int:
    if not pattern.fullmatch(raw):
        raise DateFormatError(
            f"Invalid {name} {raw!r} in date {token!r}",
            raw_data=token,
            context={"field": name},
        )
    return int(raw)


def parse_date_parts(token: str) -> tuple[int, int, int]:
    """
    Split a date token into its (day, month, year) integers.

    Day and month must be non-negative integers, year may carry a sign.
    No calendar validation is done here.

    Raises:
        DateFormatError: if the token does not have exactly three integer parts
    """
    parts = token.split(DATE_SEPARATOR)
    if len(parts) != 3:
        raise DateFormatError(
            f"Expected day/month/year, got {len(parts)} part(s) in {token!r}",
            raw_data=token,
        )

    day = _parse_field(parts[0], _UNSIGNED, token, "day")
    month = _parse_field(parts[1], _UNSIGNED, token, "month")
    year = _parse_field(parts[2], _SIGNED, token, "year")
    return day, month, year


def parse_date(token: str) -> CalendarDate:
    """
    Parse a ``day/month/year`` token into a CalendarDate.

    Raises:
        DateFormatError: on a wrong part count, a non-integer part, or a
            triple that is not a real calendar date
    """
    day, month, year = parse_date_parts(token)
    try:
        return CalendarDate(year, month, day)
    except DateFormatError as e:
        raise DateFormatError(str(e), raw_data=token) from e
