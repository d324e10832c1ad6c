"""Tests for SQLite connection pool."""

import asyncio
from pathlib import Path
from unittest.mock import patch

import pytest

import invoice_dashboard.infrastructure.storage.sqlite.connection as conn_module
from invoice_dashboard.infrastructure.storage.sqlite.connection import ConnectionPool


@pytest.fixture
async def pool(temp_db_path: Path):
    pool = ConnectionPool(temp_db_path, pool_size=2, busy_timeout=5000)
    yield pool
    await pool.close()


class TestConnectionPool:
    async def test_initialize_opens_all_connections(self, pool):
        await pool.initialize()
        assert pool.initialized
        assert pool.available == 2

    async def test_initialize_is_idempotent(self, pool):
        await pool.initialize()
        await pool.initialize()
        assert pool.available == 2

    async def test_wal_mode_enabled(self, pool):
        async with pool.acquire() as conn:
            cursor = await conn.execute("PRAGMA journal_mode")
            row = await cursor.fetchone()
        assert row[0] == "wal"

    async def test_acquire_returns_connection(self, pool):
        async with pool.acquire():
            assert pool.available == 1
        assert pool.available == 2

    async def test_acquire_waits_when_exhausted(self, pool):
        async with pool.acquire(), pool.acquire():
            with pytest.raises(asyncio.TimeoutError):
                async with asyncio.timeout(0.05):
                    async with pool.acquire():
                        pass

    async def test_transaction_commits(self, pool):
        async with pool.transaction() as conn:
            await conn.execute("CREATE TABLE t (x INTEGER)")
            await conn.execute("INSERT INTO t VALUES (1)")

        async with pool.acquire() as conn:
            cursor = await conn.execute("SELECT COUNT(*) FROM t")
            assert (await cursor.fetchone())[0] == 1

    async def test_transaction_rolls_back_on_error(self, pool):
        async with pool.transaction() as conn:
            await conn.execute("CREATE TABLE t (x INTEGER)")

        with pytest.raises(RuntimeError):
            async with pool.transaction() as conn:
                await conn.execute("INSERT INTO t VALUES (1)")
                raise RuntimeError("boom")

        async with pool.acquire() as conn:
            cursor = await conn.execute("SELECT COUNT(*) FROM t")
            assert (await cursor.fetchone())[0] == 0
        assert pool.available == 2

    async def test_close_resets_state(self, pool):
        await pool.initialize()
        await pool.close()
        assert not pool.initialized
        assert pool.available == 0


class TestGlobalPool:
    async def test_get_pool_is_singleton(self, mock_settings):
        conn_module._pool = None
        with patch.object(conn_module, "get_settings", return_value=mock_settings):
            try:
                first = await conn_module.get_pool()
                second = await conn_module.get_pool()
                assert first is second
                assert first.db_path == mock_settings.storage.db_path
            finally:
                await conn_module.close_pool()

        assert conn_module._pool is None
