"""Web interface routes implementation."""

import os
from datetime import datetime
from itertools import zip_longest
from typing import Dict, List, Optional

from fastapi import APIRouter, Request, Form, Query
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from starlette import status

from shortener.models import ShortenEntry
from shortener.exceptions import ShortenerError
from shortener.common.url_builder import build_base_url, build_short_url
from ..errors import status_for_error

router = APIRouter()

template_dir = os.path.join(os.path.dirname(__file__), "..", "templates")
templates = Jinja2Templates(directory=template_dir)


def format_expiry(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S UTC")


templates.env.filters["expiry"] = format_expiry


def _empty_row() -> Dict[str, str]:
    return {"url": "", "validity": "", "shortcode": ""}


def _rows_from_form(urls: List[str], validities: List[str], shortcodes: List[str]) -> List[Dict[str, str]]:
    """Rebuild the form rows from the repeated fields."""
    return [
        {"url": url or "", "validity": validity or "", "shortcode": shortcode or ""}
        for url, validity, shortcode in zip_longest(urls, validities, shortcodes)
    ]


def _render_form(
    request: Request,
    rows: List[Dict[str, str]],
    results: Optional[list] = None,
    error: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    service = request.app.state.service
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "rows": rows,
            "max_rows": service.max_batch_size,
            "results": results or [],
            "error": error,
        },
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def homepage(request: Request, rows: int = Query(1, ge=1)):
    """Serve the submission form with ``rows`` empty entry rows."""
    max_rows = request.app.state.service.max_batch_size
    return _render_form(request, [_empty_row() for _ in range(min(rows, max_rows))])


@router.post("/", response_class=HTMLResponse, include_in_schema=False)
async def submit_form(
    request: Request,
    url: List[str] = Form(default=[]),
    validity: List[str] = Form(default=[]),
    shortcode: List[str] = Form(default=[]),
    action: str = Form(default="shorten"),
):
    """Handle the form: add a row, or shorten every row as one batch."""
    service = request.app.state.service
    rows = _rows_from_form(url, validity, shortcode) or [_empty_row()]

    if action == "add":
        if len(rows) < service.max_batch_size:
            rows.append(_empty_row())
        return _render_form(request, rows)

    entries = [
        ShortenEntry(url=row["url"], validity=row["validity"], shortcode=row["shortcode"])
        for row in rows
    ]

    try:
        results = service.shorten_batch(entries)
    except ShortenerError as e:
        return _render_form(request, rows, error=str(e), status_code=status_for_error(e))

    base_url = build_base_url(
        headers=dict(request.headers),
        fallback_base_url=request.app.state.config.base_url,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )

    shortened = [
        {
            "shortcode": r.shortcode,
            "short_url": build_short_url(r.shortcode, base_url),
            "original_url": r.original_url,
            "expiry": r.expiry,
        }
        for r in results
    ]

    return _render_form(request, [_empty_row()], results=shortened)


@router.get("/{shortcode}", include_in_schema=False)
async def redirect_to_url(request: Request, shortcode: str):
    """Redirect to the original URL."""
    service = request.app.state.service

    try:
        original_url = service.resolve(shortcode)
    except ShortenerError as e:
        return templates.TemplateResponse(
            request,
            "error.html",
            {"error_message": str(e)},
            status_code=status_for_error(e),
        )

    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)
