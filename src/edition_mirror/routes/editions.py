"""Editions routes — listing, latest, calendar, lookup, and PDF passthrough."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated, Any

from fastapi import APIRouter, Query, Request, Response, status
from fastapi.responses import JSONResponse, RedirectResponse

from edition_mirror.drive.errors import DriveFetchError, DriveListError
from edition_mirror.services.editions import DEFAULT_PAGE_SIZE

if TYPE_CHECKING:
    from edition_mirror.models.edition import Edition
    from edition_mirror.services.editions import EditionQueries

router = APIRouter(prefix="/api", tags=["editions"])

logger = logging.getLogger(__name__)


def _queries(request: Request) -> EditionQueries:
    return request.app.state.queries


def serialize_edition(edition: Edition) -> dict[str, Any]:
    """Shape an edition the way the frontend expects it."""
    return {
        "date": edition.iso_date,
        "displayDate": edition.display_date,
        "fileId": edition.file_id,
        "pdfUrl": edition.pdf_url,
    }


def _not_found() -> JSONResponse:
    return JSONResponse({"success": False}, status_code=status.HTTP_404_NOT_FOUND)


@router.get("/papers")
async def list_editions(
    request: Request,
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(ge=1, le=100)] = DEFAULT_PAGE_SIZE,
) -> dict[str, Any]:
    """Return one page of the current snapshot with refresh metadata."""
    queries = _queries(request)
    result = queries.page(page, page_size)
    meta = queries.metadata()
    return {
        "success": True,
        "data": [serialize_edition(e) for e in result.editions],
        "meta": {
            "lastRefreshedAt": meta.last_refreshed_at.isoformat()
            if meta.last_refreshed_at
            else None,
            "total": result.total,
            "page": result.page,
            "pageSize": result.page_size,
        },
    }


@router.get("/papers/today")
async def latest_edition(request: Request) -> dict[str, Any]:
    """Return the newest edition in the folder, not the one for the system date."""
    edition = _queries(request).latest()
    return {"success": True, "data": serialize_edition(edition) if edition else None}


@router.post("/papers/refresh")
async def refresh_editions(request: Request) -> JSONResponse:
    """Trigger a discovery cycle, joining one that is already running."""
    engine = request.app.state.engine
    try:
        snapshot = await engine.refresh()
    except DriveListError as exc:
        return JSONResponse(
            {"success": False, "error": str(exc)},
            status_code=status.HTTP_502_BAD_GATEWAY,
        )
    return JSONResponse(
        {
            "success": True,
            "data": {
                "count": len(snapshot),
                "lastRefreshedAt": snapshot.refreshed_at.isoformat()
                if snapshot.refreshed_at
                else None,
            },
        }
    )


@router.get("/calendar/{year}/{month}")
async def calendar_month(request: Request, year: str, month: str) -> JSONResponse:
    """Return the editions published in a calendar month (1-based)."""
    try:
        year_num, month_num = int(year), int(month)
    except ValueError:
        year_num, month_num = 0, 0
    if year_num < 1 or not 1 <= month_num <= 12:  # noqa: PLR2004
        return JSONResponse(
            {"success": False, "error": "Invalid year/month"},
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    editions = _queries(request).month(year_num, month_num)
    return JSONResponse({"success": True, "data": [serialize_edition(e) for e in editions]})


@router.get("/papers/{date}", response_model=None)
async def edition_by_date(request: Request, date: str) -> dict[str, Any] | JSONResponse:
    """Look up an edition by ``YYYY-MM-DD`` or ``DD-MM-YYYY``."""
    edition = _queries(request).by_date(date)
    if edition is None:
        return _not_found()
    return {"success": True, "data": serialize_edition(edition)}


@router.get("/papers/{date}/pdf")
async def edition_pdf(request: Request, date: str) -> Response:
    """Proxy the PDF bytes so the browser viewer loads them same-origin."""
    edition = _queries(request).by_date(date)
    if edition is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    gateway = request.app.state.gateway
    try:
        content = await gateway.fetch_content(edition.pdf_url)
    except DriveFetchError:
        logger.warning("PDF passthrough failed — date=%s", edition.iso_date, exc_info=True)
        return Response(status_code=status.HTTP_502_BAD_GATEWAY)

    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="{edition.filename}"'},
    )


@router.get("/papers/{date}/preview")
async def edition_preview(request: Request, date: str) -> Response:
    """Redirect to a large Drive thumbnail for landing-page previews."""
    edition = _queries(request).by_date(date)
    if edition is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return RedirectResponse(edition.preview_url, status_code=status.HTTP_302_FOUND)


@router.get("/papers/{date}/thumbnail")
async def edition_thumbnail(request: Request, date: str) -> Response:
    """Redirect to a small Drive thumbnail."""
    edition = _queries(request).by_date(date)
    if edition is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return RedirectResponse(edition.thumbnail_url, status_code=status.HTTP_302_FOUND)
