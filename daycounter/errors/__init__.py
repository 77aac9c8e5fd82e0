"""
Error classification for the session counting pipeline.

Input problems (bad dates in configuration or in the exclusion file) are data
quality errors; problems with the environment the run depends on (unreadable
files, invalid configuration) are system failures. Both abort the run.
"""

from .data_quality import (
    DataQualityError,
    MalformedDataError,
    DateFormatError,
)
from .system_failures import (
    SystemFailureError,
    ConfigurationError,
    ExclusionFileError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MalformedDataError",
    "DateFormatError",
    # System Failures
    "SystemFailureError",
    "ConfigurationError",
    "ExclusionFileError",
]
