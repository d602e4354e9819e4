"""
Database engine and query execution for the LightBnB data-access layer.
Runs positional-placeholder SQL through an async SQLAlchemy engine.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlalchemy import text
from typing import Any, Dict, List, Protocol, Sequence, Tuple
import logging
import re

from lightbnb.config import Settings
from lightbnb.utils.exceptions import QueryExecutionError

logger = logging.getLogger(__name__)

Row = Dict[str, Any]

PLACEHOLDER_PATTERN = re.compile(r"\$(\d+)")


class QueryExecutor(Protocol):
    """
    Collaborator that runs one parameterized statement.

    Placeholders are positional (``$1``, ``$2``, ...) and bound from
    ``parameters`` in order. Failures are raised as ``QueryExecutionError``
    so callers can tell them apart from an empty result.
    """

    async def execute(self, sql: str, parameters: Sequence[Any] = ()) -> List[Row]:
        ...


def to_named_binds(sql: str, parameters: Sequence[Any]) -> Tuple[str, Dict[str, Any]]:
    """
    Rewrite ``$n`` placeholders into SQLAlchemy named binds.

    Args:
        sql: Statement text using ``$1``-style placeholders
        parameters: Values bound to the placeholders in order

    Returns:
        Tuple of (statement with ``:pN`` binds, bind dictionary)

    Raises:
        QueryExecutionError: If a placeholder has no matching parameter
    """
    values = list(parameters)

    def _replace(match: "re.Match[str]") -> str:
        index = int(match.group(1))
        if index < 1 or index > len(values):
            raise QueryExecutionError(
                f"Placeholder ${index} has no bound parameter ({len(values)} given)",
                sql=sql,
                parameters=values
            )
        return f":p{index}"

    statement = PLACEHOLDER_PATTERN.sub(_replace, sql)
    binds = {f"p{index}": value for index, value in enumerate(values, start=1)}
    return statement, binds


class SQLAlchemyQueryExecutor:
    """
    Query executor backed by an async SQLAlchemy engine.
    Each statement runs in its own transaction and rows come back as plain dicts.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def execute(self, sql: str, parameters: Sequence[Any] = ()) -> List[Row]:
        """
        Execute a statement and return its rows.

        Args:
            sql: Statement text with ``$n`` placeholders
            parameters: Positional parameter values

        Returns:
            List of row dictionaries (empty for statements without rows)

        Raises:
            QueryExecutionError: If the database reports a failure
        """
        values = list(parameters)
        statement, binds = to_named_binds(sql, values)

        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(text(statement), binds)
                if not result.returns_rows:
                    return []
                columns = list(result.keys())
                # Duplicate column names (e.g. two joined "id" columns) keep the last value
                rows = [dict(zip(columns, row)) for row in result.fetchall()]
        except (SQLAlchemyError, OSError) as e:
            raise QueryExecutionError(str(e), sql=sql, parameters=values) from e

        logger.debug(f"Query returned {len(rows)} rows")
        return rows

    async def close(self) -> None:
        """Dispose of the engine and its connection pool."""
        await self.engine.dispose()
        logger.info("Database connections closed")


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """
    Create the async engine for the configured database.
    SQLite engines share one connection so in-memory databases survive between statements.
    """
    if settings.is_sqlite:
        return create_async_engine(
            settings.database_url,
            echo=settings.debug,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False}
        )

    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_pre_ping=settings.pool_pre_ping,
        pool_recycle=settings.pool_recycle,
        connect_args={
            "server_settings": {
                "application_name": "lightbnb",
            }
        }
    )


async def check_connection(executor: QueryExecutor) -> bool:
    """
    Test database connectivity.
    Returns True if connection is successful, False otherwise.
    """
    try:
        await executor.execute("SELECT 1")
    except QueryExecutionError as e:
        logger.error(f"Database connection failed: {e}")
        return False
    logger.info("Database connection successful")
    return True
