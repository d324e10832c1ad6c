"""Request DTOs for API endpoints.

Mutation form posts are validated by the invoice form validator, not
here; these models cover query parameters of the read views.
"""

from pydantic import BaseModel, Field

from invoice_dashboard.core.entities import InvoiceStatus


class ListInvoicesQuery(BaseModel):
    """Query parameters for the invoice listing."""

    limit: int = Field(default=50, ge=1, le=500, description="Page size")
    offset: int = Field(default=0, ge=0, description="Rows to skip")
    status: InvoiceStatus | None = Field(default=None, description="Filter by status")

    @property
    def cache_variant(self) -> str:
        """Key distinguishing cached pages of the same listing path."""
        status = self.status.value if self.status else ""
        return f"limit={self.limit}&offset={self.offset}&status={status}"
