"""
Test configuration and fixtures for the LightBnB data-access layer.
Provides a recording executor, a seeded in-memory SQLite database and service fixtures.
"""

import pytest
from typing import Any, AsyncGenerator, Dict, List, Optional, Sequence
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from lightbnb.database import SQLAlchemyQueryExecutor
from lightbnb.services.lightbnb import LightBnBService
from lightbnb.stores.memory import InMemoryPropertyStore
from lightbnb.utils.exceptions import QueryExecutionError


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

SCHEMA_STATEMENTS = [
    """CREATE TABLE users (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name VARCHAR(255) NOT NULL,
        email VARCHAR(255) NOT NULL,
        password VARCHAR(255) NOT NULL
    )""",
    """CREATE TABLE properties (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        owner_id INTEGER NOT NULL REFERENCES users(id),
        title VARCHAR(255) NOT NULL,
        description TEXT,
        thumbnail_photo_url VARCHAR(255) NOT NULL,
        cover_photo_url VARCHAR(255) NOT NULL,
        cost_per_night INTEGER NOT NULL DEFAULT 0,
        parking_spaces INTEGER NOT NULL DEFAULT 0,
        number_of_bathrooms INTEGER NOT NULL DEFAULT 0,
        number_of_bedrooms INTEGER NOT NULL DEFAULT 0,
        country VARCHAR(255) NOT NULL,
        street VARCHAR(255) NOT NULL,
        city VARCHAR(255) NOT NULL,
        province VARCHAR(255) NOT NULL,
        post_code VARCHAR(255) NOT NULL,
        active BOOLEAN NOT NULL DEFAULT 1
    )""",
    """CREATE TABLE reservations (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        start_date DATE NOT NULL,
        end_date DATE NOT NULL,
        property_id INTEGER NOT NULL REFERENCES properties(id),
        guest_id INTEGER NOT NULL REFERENCES users(id)
    )""",
    """CREATE TABLE property_reviews (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        guest_id INTEGER NOT NULL REFERENCES users(id),
        property_id INTEGER NOT NULL REFERENCES properties(id),
        reservation_id INTEGER NOT NULL REFERENCES reservations(id),
        rating SMALLINT NOT NULL DEFAULT 0,
        message TEXT
    )""",
]

SEED_STATEMENTS = [
    "INSERT INTO users (id, name, email, password) VALUES "
    "(1, 'Eva Stanley', 'eva@example.com', 'hashed-1'), "
    "(2, 'Dominic Parks', 'dominic@example.com', 'hashed-2')",
    "INSERT INTO properties (id, owner_id, title, thumbnail_photo_url, cover_photo_url, "
    "cost_per_night, country, street, city, province, post_code) VALUES "
    "(1, 1, 'Speed lamp', 'thumb1.jpg', 'cover1.jpg', 150, 'Canada', '536 Namsub Highway', 'Vancouver', 'BC', 'V5K'), "
    "(2, 2, 'Blank corner', 'thumb2.jpg', 'cover2.jpg', 90, 'Canada', '651 Nami Road', 'Toronto', 'ON', 'M4C'), "
    "(3, 1, 'Habit mix', 'thumb3.jpg', 'cover3.jpg', 250, 'Canada', '1650 Hejto Center', 'North Vancouver', 'BC', 'V7L')",
    "INSERT INTO reservations (id, start_date, end_date, property_id, guest_id) VALUES "
    "(1, '2020-01-10', '2020-01-15', 1, 2), "
    "(2, '2019-06-01', '2019-06-05', 3, 2), "
    "(3, '2999-01-01', '2999-01-05', 2, 2), "
    "(4, '2018-03-01', '2018-03-04', 2, 1)",
    "INSERT INTO property_reviews (guest_id, property_id, reservation_id, rating, message) VALUES "
    "(2, 1, 1, 4, 'good'), "
    "(1, 1, 4, 5, 'great'), "
    "(1, 2, 4, 3, 'fine'), "
    "(2, 3, 2, 5, 'perfect')",
]


class RecordingExecutor:
    """Query executor double that records statements and returns canned rows."""

    def __init__(self, rows: Optional[List[Dict[str, Any]]] = None, error: Optional[Exception] = None):
        self.rows = rows or []
        self.error = error
        self.calls: List[tuple] = []

    async def execute(self, sql: str, parameters: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        self.calls.append((sql, list(parameters)))
        if self.error is not None:
            raise self.error
        return [dict(row) for row in self.rows]


@pytest.fixture
def recording_executor() -> RecordingExecutor:
    """Executor that succeeds with no rows."""
    return RecordingExecutor()


@pytest.fixture
def failing_executor() -> RecordingExecutor:
    """Executor whose every statement fails."""
    return RecordingExecutor(error=QueryExecutionError("connection refused"))


@pytest.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory SQLite engine with the LightBnB schema and seed rows."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False}
    )
    async with engine.begin() as conn:
        for statement in SCHEMA_STATEMENTS + SEED_STATEMENTS:
            await conn.exec_driver_sql(statement)
    yield engine
    await engine.dispose()


@pytest.fixture
def executor(test_engine: AsyncEngine) -> SQLAlchemyQueryExecutor:
    return SQLAlchemyQueryExecutor(test_engine)


@pytest.fixture
def service(executor: SQLAlchemyQueryExecutor) -> LightBnBService:
    """Service backed by SQLite with the in-memory property store."""
    return LightBnBService(executor, property_store=InMemoryPropertyStore())


@pytest.fixture
def database_service(executor: SQLAlchemyQueryExecutor) -> LightBnBService:
    """Service backed by SQLite that inserts properties into the database."""
    return LightBnBService(executor)


@pytest.fixture
def property_data() -> dict:
    return {
        "owner_id": 1,
        "title": "Port out",
        "description": "description",
        "thumbnail_photo_url": "thumb.jpg",
        "cover_photo_url": "cover.jpg",
        "cost_per_night": 120,
        "street": "1 Main Street",
        "city": "Calgary",
        "province": "AB",
        "post_code": "T2P",
        "country": "Canada",
        "parking_spaces": 1,
        "number_of_bathrooms": 2,
        "number_of_bedrooms": 3,
    }
