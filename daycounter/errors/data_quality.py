"""
Data quality error classifications for date input.

These exceptions describe dates that cannot be turned into calendar values,
whether they come from configuration or from the exclusion file.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for problems with the input data itself."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MalformedDataError(DataQualityError):
    """Data exists but is in incorrect format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format


class DateFormatError(MalformedDataError):
    """A date token is not a valid day/month/year calendar date."""

    def __init__(self, message: str = "invalid date format",
                 raw_data: Optional[str] = None, **kwargs):
        kwargs.setdefault("expected_format", "D/M/YYYY")
        super().__init__(message, raw_data=raw_data, **kwargs)
