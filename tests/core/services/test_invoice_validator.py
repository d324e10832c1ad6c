"""Tests for invoice form validation."""

import pytest

from invoice_dashboard.core.entities import InvoiceStatus
from invoice_dashboard.core.exceptions import SchemaError
from invoice_dashboard.core.services import (
    Err,
    Ok,
    parse_invoice_form,
    validate_invoice_form,
)


def _form(**overrides):
    form = {"customerId": "cust_1", "amount": "45.50", "status": "pending"}
    form.update(overrides)
    return {k: v for k, v in form.items() if v is not _MISSING}


_MISSING = object()


class TestParseInvoiceForm:
    def test_valid_form(self):
        result = parse_invoice_form(_form())
        assert isinstance(result, Ok)
        assert result.ok
        assert result.value.customer_id == "cust_1"
        assert result.value.amount == 45.5
        assert result.value.status is InvoiceStatus.PENDING

    def test_numeric_amount_accepted(self):
        result = parse_invoice_form(_form(amount=12))
        assert isinstance(result, Ok)
        assert result.value.amount_in_cents == 1200

    def test_extra_keys_ignored(self):
        result = parse_invoice_form(_form(id="inv_9", date="1999-01-01", note="x"))
        assert isinstance(result, Ok)
        assert not hasattr(result.value, "date")

    @pytest.mark.parametrize("status", ["PENDING", "void", "", "Paid"])
    def test_rejects_unknown_status(self, status):
        result = parse_invoice_form(_form(status=status))
        assert isinstance(result, Err)
        assert not result.ok
        assert result.error.fields == ["status"]

    @pytest.mark.parametrize("amount", ["abc", "", "   ", None, True, "NaN", "inf", [1]])
    def test_rejects_bad_amount(self, amount):
        result = parse_invoice_form(_form(amount=amount))
        assert isinstance(result, Err)
        assert result.error.fields == ["amount"]

    def test_amount_message_is_readable(self):
        result = parse_invoice_form(_form(amount="abc"))
        assert isinstance(result, Err)
        assert result.error.errors[0]["message"] == "amount is not numeric: 'abc'"

    def test_rejects_non_string_customer(self):
        result = parse_invoice_form(_form(customerId=42))
        assert isinstance(result, Err)
        assert result.error.fields == ["customerId"]

    def test_missing_fields_reported_together(self):
        result = parse_invoice_form({})
        assert isinstance(result, Err)
        assert sorted(result.error.fields) == ["amount", "customerId", "status"]

    def test_missing_customer(self):
        result = parse_invoice_form(_form(customerId=_MISSING))
        assert isinstance(result, Err)
        assert result.error.fields == ["customerId"]


class TestValidateInvoiceForm:
    def test_returns_form(self):
        form = validate_invoice_form(_form(status="paid"))
        assert form.status is InvoiceStatus.PAID

    def test_raises_schema_error(self):
        with pytest.raises(SchemaError) as exc_info:
            validate_invoice_form(_form(status="void"))
        assert exc_info.value.code == "SCHEMA_ERROR"


class TestAmountRange:
    @pytest.mark.parametrize("amount", ["1e20", "-1e20", "1e300", 10**400])
    def test_rejects_amount_beyond_storable_cents(self, amount):
        result = parse_invoice_form(_form(amount=amount))
        assert isinstance(result, Err)
        assert result.error.errors == [{"field": "amount", "message": "amount is out of range"}]

    def test_accepts_large_storable_amount(self):
        result = parse_invoice_form(_form(amount="90000000000000000"))
        assert isinstance(result, Ok)
        assert result.value.amount_in_cents == 9_000_000_000_000_000_000
