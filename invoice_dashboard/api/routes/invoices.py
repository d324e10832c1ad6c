"""
Invoice dashboard endpoints.

The dashboard router is mounted under the configured listing path
(``/dashboard/invoices`` by default). Mutations accept HTML form posts and
answer with a ``303 See Other`` redirect whenever the action asks for
navigation.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from fastapi.responses import RedirectResponse

from invoice_dashboard.api.dependencies import (
    get_app_settings,
    get_cache,
    get_create_invoice_use_case,
    get_delete_invoice_use_case,
    get_inv_store,
    get_update_invoice_use_case,
)
from invoice_dashboard.application.dto.requests import ListInvoicesQuery
from invoice_dashboard.application.dto.responses import (
    ActionResult,
    ErrorResponse,
    InvoiceListResponse,
    InvoiceResponse,
)
from invoice_dashboard.application.use_cases import (
    CreateInvoiceUseCase,
    DeleteInvoiceUseCase,
    UpdateInvoiceUseCase,
)
from invoice_dashboard.config import Settings
from invoice_dashboard.core.entities import InvoiceStatus
from invoice_dashboard.core.interfaces import IInvoiceStore, IPageCache

dashboard_router = APIRouter(tags=["dashboard"])
api_router = APIRouter(prefix="/api/invoices", tags=["invoices"])


def _navigate(result: ActionResult) -> Response:
    """Turn an action result into a redirect, or echo it as JSON."""
    if result.redirect_to:
        return RedirectResponse(result.redirect_to, status_code=status.HTTP_303_SEE_OTHER)
    return Response(
        content=result.model_dump_json(),
        media_type="application/json",
    )


async def _read_form(request: Request) -> dict:
    form = await request.form()
    return dict(form.items())


@dashboard_router.get(
    "",
    response_model=InvoiceListResponse,
)
async def list_invoices(
    response: Response,
    limit: int | None = Query(default=None, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    status_filter: InvoiceStatus | None = Query(default=None, alias="status"),
    store: IInvoiceStore = Depends(get_inv_store),
    cache: IPageCache = Depends(get_cache),
    settings: Settings = Depends(get_app_settings),
) -> InvoiceListResponse:
    """Invoice listing, served from the page cache when fresh."""
    query = ListInvoicesQuery(
        limit=limit or settings.dashboard.listing_page_size,
        offset=offset,
        status=status_filter,
    )
    path = settings.dashboard.invoices_path

    cached = cache.get(path, query.cache_variant)
    if cached is not None:
        response.headers["X-Cache"] = "HIT"
        return InvoiceListResponse.model_validate(cached)

    # A mutation committing while we read bumps this and the result is not cached
    generation = cache.generation(path)

    invoices = await store.list_invoices(
        limit=query.limit, offset=query.offset, status=query.status
    )
    total = await store.count_invoices(status=query.status)
    listing = InvoiceListResponse(
        invoices=[InvoiceResponse.from_entity(i) for i in invoices],
        total=total,
        limit=query.limit,
        offset=query.offset,
        has_more=query.offset + len(invoices) < total,
    )

    cache.set(
        path,
        listing.model_dump(mode="json"),
        query.cache_variant,
        generation=generation,
    )
    response.headers["X-Cache"] = "MISS"
    return listing


@dashboard_router.post(
    "",
    status_code=status.HTTP_303_SEE_OTHER,
    response_class=RedirectResponse,
    responses={422: {"model": ErrorResponse}},
)
async def create_invoice(
    request: Request,
    use_case: CreateInvoiceUseCase = Depends(get_create_invoice_use_case),
) -> Response:
    """Create an invoice from a form post and go back to the listing."""
    result = await use_case.execute(await _read_form(request))
    return _navigate(result)


@dashboard_router.post(
    "/{invoice_id}/edit",
    status_code=status.HTTP_303_SEE_OTHER,
    response_class=RedirectResponse,
    responses={422: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_invoice(
    invoice_id: str,
    request: Request,
    use_case: UpdateInvoiceUseCase = Depends(get_update_invoice_use_case),
) -> Response:
    """Update an invoice from a form post and go back to the listing."""
    result = await use_case.execute(invoice_id, await _read_form(request))
    return _navigate(result)


@dashboard_router.post(
    "/{invoice_id}/delete",
    response_model=ActionResult,
    responses={404: {"model": ErrorResponse}},
)
async def delete_invoice(
    invoice_id: str,
    use_case: DeleteInvoiceUseCase = Depends(get_delete_invoice_use_case),
) -> Response:
    """Delete an invoice. The listing stays where it is."""
    result = await use_case.execute(invoice_id)
    return _navigate(result)


@api_router.get(
    "/{invoice_id}",
    response_model=InvoiceResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_invoice(
    invoice_id: str,
    store: IInvoiceStore = Depends(get_inv_store),
) -> InvoiceResponse:
    """Get a single invoice."""
    invoice = await store.get_invoice(invoice_id)
    if invoice is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Invoice not found: {invoice_id}",
        )
    return InvoiceResponse.from_entity(invoice)
