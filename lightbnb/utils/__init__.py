"""
Utility modules for the LightBnB data-access layer.
"""

from .exceptions import (
    LightBnBError,
    QueryExecutionError,
    ConfigurationError,
    InvalidLimitError
)

__all__ = [
    "LightBnBError",
    "QueryExecutionError",
    "ConfigurationError",
    "InvalidLimitError",
]
