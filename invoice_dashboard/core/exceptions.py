"""
Domain exceptions for the invoice dashboard.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class DashboardError(Exception):
    """Base exception for all dashboard errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Validation Exceptions
class SchemaError(DashboardError):
    """Submitted form data failed schema validation."""

    def __init__(self, errors: list[dict[str, str]]):
        fields = ", ".join(e["field"] for e in errors) or "form"
        super().__init__(
            f"Invalid invoice form: {fields}",
            code="SCHEMA_ERROR",
            details={"errors": errors},
        )

    @property
    def errors(self) -> list[dict[str, str]]:
        return self.details["errors"]

    @property
    def fields(self) -> list[str]:
        return [e["field"] for e in self.errors]


# Storage Exceptions
class StoreError(DashboardError):
    """Executing a statement against the record store failed."""

    def __init__(
        self,
        operation: str,
        error: str,
        code: str = "STORE_ERROR",
        details: dict[str, Any] | None = None,
        message: str | None = None,
    ):
        super().__init__(
            message or f"Store error during {operation}: {error}",
            code=code,
            details={"operation": operation, "error": error, **(details or {})},
        )
        self.operation = operation


class InvoiceNotFoundError(StoreError):
    """Invoice not found in storage."""

    def __init__(self, invoice_id: str, operation: str = "lookup"):
        super().__init__(
            operation,
            "no matching row",
            code="INVOICE_NOT_FOUND",
            details={"invoice_id": invoice_id},
            message=f"Invoice not found: {invoice_id}",
        )
        self.invoice_id = invoice_id


class ConfigurationError(DashboardError):
    """Configuration error."""

    pass
