"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.
"""

from invoice_dashboard.application.dto.requests import ListInvoicesQuery
from invoice_dashboard.application.dto.responses import (
    ActionResult,
    ErrorResponse,
    HealthResponse,
    InvoiceListResponse,
    InvoiceResponse,
    PaginatedResponse,
    ProviderHealthResponse,
)

__all__ = [
    # Requests
    "ListInvoicesQuery",
    # Responses
    "ActionResult",
    "ErrorResponse",
    "HealthResponse",
    "InvoiceListResponse",
    "InvoiceResponse",
    "PaginatedResponse",
    "ProviderHealthResponse",
]
