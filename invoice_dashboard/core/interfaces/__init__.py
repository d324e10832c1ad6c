"""Core interfaces (ports) for dependency injection."""

from invoice_dashboard.core.interfaces.cache import ICacheInvalidator, IPageCache
from invoice_dashboard.core.interfaces.storage import IInvoiceStore

__all__ = [
    "IInvoiceStore",
    "ICacheInvalidator",
    "IPageCache",
]
