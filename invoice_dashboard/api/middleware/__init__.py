"""API middleware."""

from invoice_dashboard.api.middleware.error_handler import ErrorHandlerMiddleware
from invoice_dashboard.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware"]
