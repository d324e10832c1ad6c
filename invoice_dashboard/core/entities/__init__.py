"""Core domain entities."""

from invoice_dashboard.core.entities.invoice import (
    Invoice,
    InvoiceForm,
    InvoiceStatus,
    amount_to_cents,
)

__all__ = [
    "Invoice",
    "InvoiceForm",
    "InvoiceStatus",
    "amount_to_cents",
]
