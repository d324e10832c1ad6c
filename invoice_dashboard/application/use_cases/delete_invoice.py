"""Delete Invoice Use Case."""

from invoice_dashboard.application.dto.responses import ActionResult
from invoice_dashboard.config import get_logger, get_settings
from invoice_dashboard.core.exceptions import InvoiceNotFoundError
from invoice_dashboard.core.interfaces import ICacheInvalidator, IInvoiceStore

logger = get_logger(__name__)


class DeleteInvoiceUseCase:
    """
    Permanently delete an invoice.

    Invoked from the listing itself, so only the listing cache is
    invalidated; no navigation is requested.
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

    async def execute(self, invoice_id: str) -> ActionResult:
        """Execute delete invoice use case."""
        store = await self._get_invoice_store()
        rows = await store.delete_invoice(invoice_id)

        if rows == 0:
            if self.strict:
                raise InvoiceNotFoundError(invoice_id, operation="delete")
            logger.warning("invoice_delete_no_match", invoice_id=invoice_id)

        self._get_cache().invalidate(self.listing_path)

        return ActionResult(
            success=True,
            redirect_to=None,
            invoice_id=invoice_id,
            rows_affected=rows,
        )
