"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Generator
from datetime import UTC, datetime
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

import invoice_dashboard.infrastructure.storage.sqlite.connection as conn_module
from invoice_dashboard.infrastructure.cache import reset_page_cache
from invoice_dashboard.infrastructure.storage.sqlite.migrations import run_migrations

FIXED_NOW = datetime(2026, 3, 14, 23, 30, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _fresh_page_cache() -> Generator[None, None, None]:
    """Every test starts with an empty process-wide page cache."""
    reset_page_cache()
    yield
    reset_page_cache()


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
def mock_settings(temp_db_path: Path):
    """Mock settings with temp database path."""
    mock = MagicMock()
    mock.storage.db_path = temp_db_path
    mock.storage.pool_size = 2
    mock.storage.busy_timeout = 5000
    return mock


@pytest.fixture
async def migrated_db(temp_db_path: Path, mock_settings) -> AsyncGenerator[Path, None]:
    """
    Temporary database with all migrations applied.

    The global connection pool is pointed at it for the duration of the test.
    """
    await run_migrations(temp_db_path)

    conn_module._pool = None
    with patch.object(conn_module, "get_settings", return_value=mock_settings):
        yield temp_db_path
        await conn_module.close_pool()


@pytest.fixture
def fixed_clock():
    """Clock returning a fixed UTC instant."""
    return lambda: FIXED_NOW


@pytest.fixture
def sample_form() -> dict[str, str]:
    """Form fields as a browser would post them."""
    return {"customerId": "cust_1", "amount": "45.50", "status": "pending"}
