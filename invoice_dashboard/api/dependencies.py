"""
Dependency injection container for FastAPI.

Provides stores, the page cache and use cases to route handlers.
"""

from fastapi import Depends

from invoice_dashboard.application.use_cases import (
    CreateInvoiceUseCase,
    DeleteInvoiceUseCase,
    UpdateInvoiceUseCase,
)
from invoice_dashboard.config import Settings, get_settings
from invoice_dashboard.core.interfaces import IInvoiceStore, IPageCache
from invoice_dashboard.infrastructure.cache import get_page_cache
from invoice_dashboard.infrastructure.storage.sqlite import get_invoice_store


def get_app_settings() -> Settings:
    """Get application settings."""
    return get_settings()


# Store dependencies
async def get_inv_store() -> IInvoiceStore:
    """Get invoice store."""
    return await get_invoice_store()


def get_cache() -> IPageCache:
    """Get page cache."""
    return get_page_cache()


# Use case dependencies
def get_create_invoice_use_case(
    store: IInvoiceStore = Depends(get_inv_store),
    cache: IPageCache = Depends(get_cache),
    settings: Settings = Depends(get_app_settings),
) -> CreateInvoiceUseCase:
    """Get create invoice use case."""
    return CreateInvoiceUseCase(
        invoice_store=store,
        cache=cache,
        listing_path=settings.dashboard.invoices_path,
    )


def get_update_invoice_use_case(
    store: IInvoiceStore = Depends(get_inv_store),
    cache: IPageCache = Depends(get_cache),
    settings: Settings = Depends(get_app_settings),
) -> UpdateInvoiceUseCase:
    """Get update invoice use case."""
    return UpdateInvoiceUseCase(
        invoice_store=store,
        cache=cache,
        listing_path=settings.dashboard.invoices_path,
        strict=settings.dashboard.strict_mutations,
    )


def get_delete_invoice_use_case(
    store: IInvoiceStore = Depends(get_inv_store),
    cache: IPageCache = Depends(get_cache),
    settings: Settings = Depends(get_app_settings),
) -> DeleteInvoiceUseCase:
    """Get delete invoice use case."""
    return DeleteInvoiceUseCase(
        invoice_store=store,
        cache=cache,
        listing_path=settings.dashboard.invoices_path,
        strict=settings.dashboard.strict_mutations,
    )
