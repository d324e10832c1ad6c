"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from invoice_dashboard.core.entities import Invoice, InvoiceStatus


class ActionResult(BaseModel):
    """Outcome of an invoice mutation.

    Mutations never navigate themselves; when ``redirect_to`` is set the
    caller is expected to send the user there.
    """

    success: bool = True
    redirect_to: str | None = Field(default=None, description="Path to navigate to")
    invoice_id: str | None = Field(default=None, description="Affected invoice ID")
    rows_affected: int = Field(default=0, description="Rows changed by the statement")


class InvoiceResponse(BaseModel):
    """Invoice response DTO."""

    id: str = Field(..., description="Invoice ID")
    customer_id: str = Field(..., description="Customer reference")
    amount: int = Field(..., description="Amount in cents")
    amount_major: float = Field(..., description="Amount in major currency units")
    status: InvoiceStatus = Field(..., description="pending or paid")
    date: str = Field(..., description="Creation date (YYYY-MM-DD)")

    @classmethod
    def from_entity(cls, invoice: Invoice) -> "InvoiceResponse":
        return cls(
            id=invoice.id or "",
            customer_id=invoice.customer_id,
            amount=invoice.amount,
            amount_major=invoice.amount_major,
            status=invoice.status,
            date=invoice.date,
        )


class PaginatedResponse(BaseModel):
    """Base for paginated responses."""

    total: int
    limit: int
    offset: int
    has_more: bool


class InvoiceListResponse(PaginatedResponse):
    """Invoice listing page."""

    invoices: list[InvoiceResponse]


class ProviderHealthResponse(BaseModel):
    """Provider health status."""

    name: str
    available: bool
    latency_ms: float | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: ProviderHealthResponse | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. SCHEMA_ERROR)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    errors: list[dict[str, str]] = Field(default_factory=list, description="Per-field errors")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
