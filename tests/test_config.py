"""
Tests for settings validation.
"""

import pytest
from pydantic import ValidationError

from lightbnb.config import Settings


class TestSettings:

    def test_defaults(self):
        settings = Settings()

        assert settings.default_result_limit == 10
        assert settings.property_store == "memory"
        assert settings.uses_memory_property_store
        assert settings.database_url.startswith("postgresql+asyncpg://")

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("postgresql://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
            ("postgres://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
            ("sqlite:///./lightbnb.db", "sqlite+aiosqlite:///./lightbnb.db"),
            ("postgresql+asyncpg://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
        ]
    )
    def test_database_url_uses_async_driver(self, url, expected):
        assert Settings(database_url=url).database_url == expected

    def test_sqlite_detection(self):
        assert Settings(database_url="sqlite+aiosqlite:///:memory:").is_sqlite
        assert not Settings(database_url="postgresql://u:p@h/db").is_sqlite

    def test_property_store_is_normalized(self):
        assert Settings(property_store="DATABASE").property_store == "database"

    def test_unknown_property_store(self):
        with pytest.raises(ValidationError):
            Settings(property_store="redis")

    def test_unknown_environment(self):
        with pytest.raises(ValidationError):
            Settings(environment="qa")

    def test_default_result_limit_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(default_result_limit=0)

    def test_log_level_upper_case(self):
        assert Settings(log_level="debug").log_level == "DEBUG"
