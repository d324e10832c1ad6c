"""Update Invoice Use Case - rewrites customer, amount and status of an invoice."""

from collections.abc import Mapping
from typing import Any

from invoice_dashboard.application.dto.responses import ActionResult
from invoice_dashboard.config import get_logger, get_settings
from invoice_dashboard.core.exceptions import InvoiceNotFoundError
from invoice_dashboard.core.interfaces import ICacheInvalidator, IInvoiceStore
from invoice_dashboard.core.services import validate_invoice_form

logger = get_logger(__name__)


class UpdateInvoiceUseCase:
    """
    Update an existing invoice from a submitted form.

    ``date`` and ``id`` are never changed. An ``id`` matching no row is a
    silent no-op unless strict mode is on, in which case
    ``InvoiceNotFoundError`` is raised before the cache is touched.
    """

    def __init__(
        self,
        invoice_store: IInvoiceStore | None = None,
        cache: ICacheInvalidator | None = None,
        listing_path: str | None = None,
        strict: bool | None = None,
    ):
        self._invoice_store = invoice_store
        self._cache = cache
        self._listing_path = listing_path
        self._strict = strict

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

    @property
    def strict(self) -> bool:
        if self._strict is None:
            return get_settings().dashboard.strict_mutations
        return self._strict

    async def execute(self, invoice_id: str, form_data: Mapping[str, Any]) -> ActionResult:
        """Execute update invoice use case."""
        form = validate_invoice_form(form_data)

        logger.info("update_invoice_started", invoice_id=invoice_id)

        store = await self._get_invoice_store()
        rows = await store.update_invoice_fields(
            invoice_id,
            customer_id=form.customer_id,
            amount=form.amount_in_cents,
            status=form.status,
        )

        if rows == 0:
            if self.strict:
                raise InvoiceNotFoundError(invoice_id, operation="update")
            logger.warning("invoice_update_no_match", invoice_id=invoice_id)

        self._get_cache().invalidate(self.listing_path)

        logger.info("update_invoice_complete", invoice_id=invoice_id, rows=rows)

        return ActionResult(
            success=True,
            redirect_to=self.listing_path,
            invoice_id=invoice_id,
            rows_affected=rows,
        )
