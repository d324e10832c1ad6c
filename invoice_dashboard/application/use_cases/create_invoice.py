"""Create Invoice Use Case - validates the form and inserts one invoice row."""

from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any

from invoice_dashboard.application.dto.responses import ActionResult
from invoice_dashboard.config import get_logger, get_settings
from invoice_dashboard.core.entities import Invoice
from invoice_dashboard.core.interfaces import ICacheInvalidator, IInvoiceStore
from invoice_dashboard.core.services import validate_invoice_form

logger = get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(UTC)


class CreateInvoiceUseCase:
    """
    Create an invoice from a submitted form.

    The amount is stored in cents and the date is today's UTC date. On
    success the invoice listing is invalidated and the caller is told to
    navigate back to it.
    """

    def __init__(
        self,
        invoice_store: IInvoiceStore | None = None,
        cache: ICacheInvalidator | None = None,
        listing_path: str | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._invoice_store = invoice_store
        self._cache = cache
        self._listing_path = listing_path
        self._clock = clock

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from invoice_dashboard.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    def _get_cache(self) -> ICacheInvalidator:
        if self._cache is None:
            from invoice_dashboard.infrastructure.cache import get_page_cache

            self._cache = get_page_cache()
        return self._cache

    @property
    def listing_path(self) -> str:
        return self._listing_path or get_settings().dashboard.invoices_path

    def today(self) -> str:
        """Current UTC date as YYYY-MM-DD."""
        return self._clock().astimezone(UTC).strftime("%Y-%m-%d")

    async def execute(self, form_data: Mapping[str, Any]) -> ActionResult:
        """Execute create invoice use case."""
        form = validate_invoice_form(form_data)

        logger.info(
            "create_invoice_started",
            customer_id=form.customer_id,
            status=form.status.value,
        )

        store = await self._get_invoice_store()
        invoice = Invoice(
            customer_id=form.customer_id,
            amount=form.amount_in_cents,
            status=form.status,
            date=self.today(),
        )
        invoice = await store.create_invoice(invoice)

        self._get_cache().invalidate(self.listing_path)

        logger.info(
            "create_invoice_complete",
            invoice_id=invoice.id,
            amount=invoice.amount,
            date=invoice.date,
        )

        return ActionResult(
            success=True,
            redirect_to=self.listing_path,
            invoice_id=invoice.id,
            rows_affected=1,
        )
