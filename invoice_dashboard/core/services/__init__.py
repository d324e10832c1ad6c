"""
Core business logic services.

Layer-pure services that depend only on:
- invoice_dashboard/core/entities/*
- invoice_dashboard/core/exceptions.py

NO infrastructure imports.
"""

from invoice_dashboard.core.services.invoice_validator import (
    Err,
    Ok,
    ValidationResult,
    parse_invoice_form,
    validate_invoice_form,
)

__all__ = [
    "Ok",
    "Err",
    "ValidationResult",
    "parse_invoice_form",
    "validate_invoice_form",
]
