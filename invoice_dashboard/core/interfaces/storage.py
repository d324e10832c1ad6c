"""
Abstract interfaces for storage providers.

Defines the contract for the invoice record store.
"""

from abc import ABC, abstractmethod

from invoice_dashboard.core.entities.invoice import Invoice, InvoiceStatus


class IInvoiceStore(ABC):
    """
    Abstract interface for invoice storage.

    Every mutation is a single parameterized statement. Update and delete
    report the number of affected rows instead of raising on a miss.
    """

    @abstractmethod
    async def create_invoice(self, invoice: Invoice) -> Invoice:
        """Insert a new invoice, assigning its ID."""
        pass

    @abstractmethod
    async def update_invoice_fields(
        self,
        invoice_id: str,
        customer_id: str,
        amount: int,
        status: InvoiceStatus,
    ) -> int:
        """Update customer, amount and status of an invoice. Returns affected rows."""
        pass

    @abstractmethod
    async def delete_invoice(self, invoice_id: str) -> int:
        """Delete an invoice. Returns affected rows."""
        pass

    @abstractmethod
    async def get_invoice(self, invoice_id: str) -> Invoice | None:
        """Get invoice by ID."""
        pass

    @abstractmethod
    async def list_invoices(
        self,
        limit: int = 100,
        offset: int = 0,
        status: InvoiceStatus | None = None,
    ) -> list[Invoice]:
        """List invoices with pagination."""
        pass

    @abstractmethod
    async def count_invoices(self, status: InvoiceStatus | None = None) -> int:
        """Count invoices."""
        pass
