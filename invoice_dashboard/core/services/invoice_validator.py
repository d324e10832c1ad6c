"""
Invoice form validation.

Turns an untyped form mapping into an ``InvoiceForm`` and reports failures
as a tagged result rather than raising, so callers decide how to surface
them. ``validate_invoice_form`` is the raising variant used by the
mutation use cases.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from invoice_dashboard.config import get_logger
from invoice_dashboard.core.entities.invoice import InvoiceForm
from invoice_dashboard.core.exceptions import SchemaError

logger = get_logger(__name__)

T = TypeVar("T")

FORM_FIELDS = ("customerId", "amount", "status")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful validation."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed validation."""

    error: SchemaError

    @property
    def ok(self) -> bool:
        return False


ValidationResult = Ok[InvoiceForm] | Err


def _field_name(loc: tuple[Any, ...]) -> str:
    if not loc:
        return "form"
    name = str(loc[0])
    return "customerId" if name == "customer_id" else name


def _to_errors(exc: ValidationError) -> list[dict[str, str]]:
    errors = []
    for error in exc.errors():
        message = error["msg"]
        # pydantic prefixes messages raised from validators
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        errors.append({"field": _field_name(error["loc"]), "message": message})
    return errors


def parse_invoice_form(raw: Mapping[str, Any]) -> ValidationResult:
    """Validate raw form fields.

    Only ``customerId``, ``amount`` and ``status`` are read; any other
    submitted keys are ignored.
    """
    data = {key: raw[key] for key in FORM_FIELDS if key in raw}
    try:
        return Ok(InvoiceForm.model_validate(data))
    except ValidationError as e:
        error = SchemaError(_to_errors(e))
        logger.info("invoice_form_rejected", fields=error.fields)
        return Err(error)


def validate_invoice_form(raw: Mapping[str, Any]) -> InvoiceForm:
    """Validate raw form fields, raising ``SchemaError`` on failure."""
    result = parse_invoice_form(raw)
    if isinstance(result, Err):
        raise result.error
    return result.value
