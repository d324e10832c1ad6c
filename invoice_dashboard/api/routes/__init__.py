"""API route modules."""

from invoice_dashboard.api.routes.health import router as health_router
from invoice_dashboard.api.routes.invoices import api_router as invoices_router
from invoice_dashboard.api.routes.invoices import dashboard_router

__all__ = [
    "health_router",
    "invoices_router",
    "dashboard_router",
]
