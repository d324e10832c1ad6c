"""
SQLite implementation of invoice storage.

Each mutation runs exactly one parameterized statement in its own
transaction. Driver errors are re-raised as ``StoreError``.
"""

from uuid import uuid4

import aiosqlite

from invoice_dashboard.config import get_logger
from invoice_dashboard.core.entities import Invoice, InvoiceStatus
from invoice_dashboard.core.exceptions import StoreError
from invoice_dashboard.core.interfaces import IInvoiceStore
from invoice_dashboard.infrastructure.storage.sqlite.connection import (
    get_connection,
    get_transaction,
)

logger = get_logger(__name__)


class SQLiteInvoiceStore(IInvoiceStore):
    """SQLite implementation of invoice storage."""

    async def create_invoice(self, invoice: Invoice) -> Invoice:
        """Insert a new invoice row. The store assigns the ID."""
        invoice_id = str(uuid4())
        try:
            async with get_transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO invoices (id, customer_id, amount, status, date)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (
                        invoice_id,
                        invoice.customer_id,
                        invoice.amount,
                        invoice.status.value,
                        invoice.date,
                    ),
                )
        except (aiosqlite.Error, OverflowError) as e:
            logger.error("invoice_insert_failed", error=str(e))
            raise StoreError("insert", str(e)) from e

        invoice.id = invoice_id
        logger.info("invoice_created", invoice_id=invoice_id, amount=invoice.amount)
        return invoice

    async def update_invoice_fields(
        self,
        invoice_id: str,
        customer_id: str,
        amount: int,
        status: InvoiceStatus,
    ) -> int:
        """Update customer, amount and status. ``date`` is never touched."""
        try:
            async with get_transaction() as conn:
                cursor = await conn.execute(
                    """
                    UPDATE invoices
                    SET customer_id = ?, amount = ?, status = ?
                    WHERE id = ?
                    """,
                    (customer_id, amount, status.value, invoice_id),
                )
                rows = cursor.rowcount
        except (aiosqlite.Error, OverflowError) as e:
            logger.error("invoice_update_failed", invoice_id=invoice_id, error=str(e))
            raise StoreError("update", str(e), details={"invoice_id": invoice_id}) from e

        logger.info("invoice_updated", invoice_id=invoice_id, rows=rows)
        return rows

    async def delete_invoice(self, invoice_id: str) -> int:
        """Delete an invoice row."""
        try:
            async with get_transaction() as conn:
                cursor = await conn.execute("DELETE FROM invoices WHERE id = ?", (invoice_id,))
                rows = cursor.rowcount
        except (aiosqlite.Error, OverflowError) as e:
            logger.error("invoice_delete_failed", invoice_id=invoice_id, error=str(e))
            raise StoreError("delete", str(e), details={"invoice_id": invoice_id}) from e

        logger.info("invoice_deleted", invoice_id=invoice_id, rows=rows)
        return rows

    async def get_invoice(self, invoice_id: str) -> Invoice | None:
        """Get invoice by ID."""
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM invoices WHERE id = ?", (invoice_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_invoice(row)

    async def list_invoices(
        self,
        limit: int = 100,
        offset: int = 0,
        status: InvoiceStatus | None = None,
    ) -> list[Invoice]:
        """List invoices, newest first."""
        async with get_connection() as conn:
            if status:
                cursor = await conn.execute(
                    """
                    SELECT * FROM invoices
                    WHERE status = ?
                    ORDER BY date DESC, id
                    LIMIT ? OFFSET ?
                    """,
                    (status.value, limit, offset),
                )
            else:
                cursor = await conn.execute(
                    """
                    SELECT * FROM invoices
                    ORDER BY date DESC, id
                    LIMIT ? OFFSET ?
                    """,
                    (limit, offset),
                )
            rows = await cursor.fetchall()
            return [self._row_to_invoice(row) for row in rows]

    async def count_invoices(self, status: InvoiceStatus | None = None) -> int:
        """Count invoices, optionally by status."""
        async with get_connection() as conn:
            if status:
                cursor = await conn.execute(
                    "SELECT COUNT(*) FROM invoices WHERE status = ?", (status.value,)
                )
            else:
                cursor = await conn.execute("SELECT COUNT(*) FROM invoices")
            row = await cursor.fetchone()
            return row[0] if row else 0

    def _row_to_invoice(self, row: aiosqlite.Row) -> Invoice:
        return Invoice(
            id=row["id"],
            customer_id=row["customer_id"],
            amount=row["amount"],
            status=InvoiceStatus(row["status"]),
            date=row["date"],
        )
