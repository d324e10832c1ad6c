"""Storage infrastructure implementations."""

from invoice_dashboard.infrastructure.storage.sqlite import (
    SQLiteInvoiceStore,
    close_pool,
    get_connection,
    get_invoice_store,
    get_pool,
    get_transaction,
)

__all__ = [
    "SQLiteInvoiceStore",
    "get_invoice_store",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
]
