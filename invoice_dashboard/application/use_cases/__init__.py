"""Application use cases."""

from invoice_dashboard.application.use_cases.create_invoice import CreateInvoiceUseCase
from invoice_dashboard.application.use_cases.delete_invoice import DeleteInvoiceUseCase
from invoice_dashboard.application.use_cases.update_invoice import UpdateInvoiceUseCase

__all__ = [
    "CreateInvoiceUseCase",
    "UpdateInvoiceUseCase",
    "DeleteInvoiceUseCase",
]
