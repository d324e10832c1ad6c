"""End-to-end invoice mutation flows against a real SQLite database."""

from pathlib import Path

import aiosqlite
import pytest

from invoice_dashboard.application.use_cases import (
    CreateInvoiceUseCase,
    DeleteInvoiceUseCase,
    UpdateInvoiceUseCase,
)
from invoice_dashboard.core.entities import InvoiceStatus
from invoice_dashboard.core.exceptions import SchemaError
from invoice_dashboard.infrastructure.cache import PageCache
from invoice_dashboard.infrastructure.storage.sqlite import SQLiteInvoiceStore

LISTING = "/dashboard/invoices"


@pytest.fixture
async def seeded_db(migrated_db: Path) -> Path:
    """Database holding a single invoice ``inv_1`` created at the start of the year."""
    async with aiosqlite.connect(migrated_db) as conn:
        await conn.execute(
            "INSERT INTO invoices (id, customer_id, amount, status, date) VALUES (?, ?, ?, ?, ?)",
            ("inv_1", "cust_1", 4550, "pending", "2026-01-02"),
        )
        await conn.commit()
    return migrated_db


@pytest.fixture
def store() -> SQLiteInvoiceStore:
    return SQLiteInvoiceStore()


@pytest.fixture
def page_cache() -> PageCache:
    cache = PageCache()
    cache.set(LISTING, {"stale": True})
    return cache


async def test_create_inserts_row_in_cents(migrated_db, store, page_cache, fixed_clock):
    use_case = CreateInvoiceUseCase(store, page_cache, LISTING, clock=fixed_clock)

    result = await use_case.execute({"customerId": "cust_1", "amount": "45.50", "status": "pending"})

    invoice = await store.get_invoice(result.invoice_id)
    assert invoice.amount == 4550
    assert invoice.status is InvoiceStatus.PENDING
    assert invoice.date == "2026-03-14"
    assert result.redirect_to == LISTING
    assert page_cache.get(LISTING) is None


async def test_update_rewrites_fields_and_keeps_date(seeded_db, store, page_cache):
    use_case = UpdateInvoiceUseCase(store, page_cache, LISTING, strict=False)

    result = await use_case.execute("inv_1", {"customerId": "cust_2", "amount": "10", "status": "paid"})

    invoice = await store.get_invoice("inv_1")
    assert invoice.customer_id == "cust_2"
    assert invoice.amount == 1000
    assert invoice.status is InvoiceStatus.PAID
    assert invoice.date == "2026-01-02"
    assert result.rows_affected == 1
    assert page_cache.get(LISTING) is None


async def test_delete_removes_row_and_invalidates(seeded_db, store, page_cache):
    use_case = DeleteInvoiceUseCase(store, page_cache, LISTING, strict=False)

    result = await use_case.execute("inv_1")

    assert result.rows_affected == 1
    assert await store.get_invoice("inv_1") is None
    assert await store.list_invoices() == []
    assert page_cache.get(LISTING) is None


async def test_create_with_bad_amount_inserts_nothing(migrated_db, store, page_cache, fixed_clock):
    use_case = CreateInvoiceUseCase(store, page_cache, LISTING, clock=fixed_clock)

    with pytest.raises(SchemaError):
        await use_case.execute({"customerId": "cust_1", "amount": "abc", "status": "pending"})

    assert await store.count_invoices() == 0
    assert page_cache.get(LISTING) == {"stale": True}


async def test_update_of_missing_invoice_changes_nothing(seeded_db, store, page_cache):
    use_case = UpdateInvoiceUseCase(store, page_cache, LISTING, strict=False)

    result = await use_case.execute("missing", {"customerId": "cust_9", "amount": "1", "status": "paid"})

    assert result.rows_affected == 0
    invoice = await store.get_invoice("inv_1")
    assert invoice.customer_id == "cust_1"


async def test_create_with_oversized_amount_is_schema_error(migrated_db, store, page_cache, fixed_clock):
    use_case = CreateInvoiceUseCase(store, page_cache, LISTING, clock=fixed_clock)

    with pytest.raises(SchemaError) as exc_info:
        await use_case.execute({"customerId": "c", "amount": "1e20", "status": "paid"})

    assert exc_info.value.fields == ["amount"]
    assert await store.count_invoices() == 0
