"""
Invoice domain entities with Pydantic v2 validation.

Amounts are persisted in minor currency units (cents). The submitted
form carries a decimal amount which is converted with half-up rounding.
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# SQLite INTEGER is a signed 64-bit value
MIN_CENTS = -(2**63)
MAX_CENTS = 2**63 - 1


class InvoiceStatus(str, Enum):
    """Invoice payment status."""

    PENDING = "pending"
    PAID = "paid"


def amount_to_cents(amount: float) -> int:
    """Convert a decimal amount to minor units, rounding half away from zero."""
    cents = Decimal(str(amount)) * 100
    return int(cents.quantize(Decimal(1), rounding=ROUND_HALF_UP))


class Invoice(BaseModel):
    """
    Persisted invoice row.

    ``id`` is assigned by the store on insert and never changes afterwards.
    ``date`` is set once at creation time.
    """

    id: str | None = None
    customer_id: str
    amount: int  # cents
    status: InvoiceStatus
    date: str

    @field_validator("date")
    @classmethod
    def check_date_format(cls, v: str) -> str:
        if not DATE_PATTERN.match(v):
            raise ValueError(f"date must be YYYY-MM-DD, got {v!r}")
        return v

    @property
    def amount_major(self) -> float:
        """Amount in major currency units."""
        return self.amount / 100


class InvoiceForm(BaseModel):
    """
    Validated invoice form submission.

    Built from raw form fields (``customerId``, ``amount``, ``status``).
    ``id`` and ``date`` are never part of the form.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    customer_id: StrictStr = Field(alias="customerId")
    amount: float
    status: InvoiceStatus

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, v: Any) -> float:
        """Parse the submitted amount into a finite number."""
        if v is None or isinstance(v, bool):
            raise ValueError("amount must be a number")
        if isinstance(v, (int, float)):
            try:
                value = float(v)
            except OverflowError:
                raise ValueError("amount is out of range")
        elif isinstance(v, (str, Decimal)):
            s = str(v).strip()
            if not s:
                raise ValueError("amount is required")
            try:
                value = float(Decimal(s))
            except (InvalidOperation, ValueError):
                raise ValueError(f"amount is not numeric: {s[:50]!r}")
        else:
            raise ValueError("amount must be a number")
        if not math.isfinite(value):
            raise ValueError("amount must be finite")
        if not MIN_CENTS <= Decimal(str(value)) * 100 <= MAX_CENTS:
            raise ValueError("amount is out of range")
        return value

    @property
    def amount_in_cents(self) -> int:
        return amount_to_cents(self.amount)
