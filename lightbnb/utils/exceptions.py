"""
Custom exception classes for the LightBnB data-access layer.
Provides structured errors with stable error codes for logging.
"""

from typing import Any, Optional, Sequence


class LightBnBError(Exception):
    """Base data-access exception class."""
    
    def __init__(self, detail: str, error_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code


class QueryExecutionError(LightBnBError):
    """
    The query executor failed to run a statement.
    Covers connectivity problems, constraint violations and SQL syntax errors.
    """
    
    def __init__(
        self,
        detail: str,
        sql: Optional[str] = None,
        parameters: Optional[Sequence[Any]] = None
    ):
        super().__init__(detail, error_code="QUERY_EXECUTION_ERROR")
        self.sql = sql
        self.parameters = list(parameters or [])


class ConfigurationError(LightBnBError):
    """Invalid or unusable configuration."""
    
    def __init__(self, detail: str):
        super().__init__(detail, error_code="CONFIGURATION_ERROR")


class InvalidLimitError(LightBnBError, ValueError):
    """Result limit is not a positive integer."""
    
    def __init__(self, limit: Any):
        super().__init__(
            f"Limit must be a positive integer, got {limit!r}",
            error_code="INVALID_LIMIT"
        )
        self.limit = limit
