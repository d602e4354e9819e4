"""
Base repository class and query outcome type.
Runs statements through the injected query executor and turns failures into results.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence
import logging

from lightbnb.database import QueryExecutor
from lightbnb.utils.exceptions import QueryExecutionError

logger = logging.getLogger(__name__)


class QueryStatus(str, Enum):
    """Outcome of a single query."""
    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass
class QueryResult:
    """
    Tri-state query outcome.
    Lets callers tell "nothing found" apart from "the database failed".
    """
    status: QueryStatus
    rows: List[Dict[str, Any]] = field(default_factory=list)
    error: Optional[QueryExecutionError] = None

    @classmethod
    def from_rows(cls, rows: List[Dict[str, Any]]) -> "QueryResult":
        status = QueryStatus.OK if rows else QueryStatus.EMPTY
        return cls(status=status, rows=list(rows))

    @classmethod
    def failure(cls, error: QueryExecutionError) -> "QueryResult":
        return cls(status=QueryStatus.FAILED, error=error)

    @property
    def found(self) -> bool:
        return self.status == QueryStatus.OK

    @property
    def failed(self) -> bool:
        return self.status == QueryStatus.FAILED

    def first(self) -> Optional[Dict[str, Any]]:
        """Return the first row, or None when there is none."""
        return self.rows[0] if self.rows else None


class BaseRepository:
    """
    Base repository class providing statement execution with error capture.
    Each operation performs exactly one executor round trip and never raises
    on database failures.
    """

    def __init__(self, executor: QueryExecutor):
        """
        Initialize repository with a query executor.

        Args:
            executor: Collaborator that runs parameterized SQL
        """
        self.executor = executor

    async def run(self, sql: str, parameters: Sequence[Any], operation: str) -> QueryResult:
        """
        Execute one statement and wrap the outcome.

        Args:
            sql: Statement text with ``$n`` placeholders
            parameters: Positional parameters
            operation: Short description used in log messages

        Returns:
            QueryResult with rows, or a failed result carrying the error
        """
        try:
            rows = await self.executor.execute(sql, list(parameters))
        except QueryExecutionError as e:
            logger.error(f"Failed to {operation}: {e}")
            return QueryResult.failure(e)

        logger.debug(f"{operation}: {len(rows)} rows")
        return QueryResult.from_rows(rows)
