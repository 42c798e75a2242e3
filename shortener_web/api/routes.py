"""API routes implementation."""

from fastapi import APIRouter, Request, HTTPException, status
from datetime import datetime, timezone

from .schemas import (
    ShortenRequest,
    ShortenResponse,
    ShortenResultResponse,
    URLInfoResponse,
    URLListResponse,
    HealthResponse,
    ErrorResponse,
    StatisticsResponse,
)
from shortener.models import ShortenEntry
from shortener.exceptions import ShortenerError
from shortener.common.url_builder import build_base_url, build_short_url
from ..errors import status_for_error

router = APIRouter()


def _base_url(request: Request) -> str:
    return build_base_url(
        headers=dict(request.headers),
        fallback_base_url=request.app.state.config.base_url,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid URL, shortcode or batch"},
        409: {"model": ErrorResponse, "description": "Shortcode already in use"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Create short URLs",
    description="Shorten up to five URLs at once. The first invalid entry rejects the whole batch.",
)
async def shorten_urls(request: Request, body: ShortenRequest):
    """Create shortened URLs."""
    service = request.app.state.service

    entries = [
        ShortenEntry(url=e.url, validity=e.validity, shortcode=e.shortcode)
        for e in body.entries
    ]

    try:
        results = service.shorten_batch(entries)
    except ShortenerError as e:
        raise HTTPException(status_code=status_for_error(e), detail=str(e))

    base_url = _base_url(request)

    return ShortenResponse(
        results=[
            ShortenResultResponse(
                shortcode=r.shortcode,
                short_url=build_short_url(r.shortcode, base_url),
                original_url=r.original_url,
                expiry=r.expiry,
            )
            for r in results
        ]
    )


@router.get(
    "/urls",
    response_model=URLListResponse,
    summary="List URLs",
    description="List every stored short URL, including expired ones.",
)
async def list_urls(request: Request):
    """List stored short URLs."""
    service = request.app.state.service
    base_url = _base_url(request)

    try:
        entries = service.list_entries()
    except ShortenerError as e:
        raise HTTPException(status_code=status_for_error(e), detail=str(e))

    return URLListResponse(
        urls=[
            URLInfoResponse(
                shortcode=entry.shortcode,
                short_url=build_short_url(entry.shortcode, base_url),
                original_url=entry.original_url,
                expiry=entry.expiry,
                expired=service.is_expired(entry),
            )
            for entry in entries
        ]
    )


@router.get(
    "/urls/{shortcode}",
    response_model=URLInfoResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Shortcode expired or not found"},
    },
    summary="Get URL information",
    description="Get a live short URL. Expired and unknown shortcodes both give 404.",
)
async def get_url_info(request: Request, shortcode: str):
    """Get information about a shortened URL."""
    service = request.app.state.service

    try:
        entry = service.get_entry(shortcode)
    except ShortenerError as e:
        raise HTTPException(status_code=status_for_error(e), detail=str(e))

    if entry is None or service.is_expired(entry):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Short URL expired or not found",
        )

    return URLInfoResponse(
        shortcode=entry.shortcode,
        short_url=build_short_url(entry.shortcode, _base_url(request)),
        original_url=entry.original_url,
        expiry=entry.expiry,
        expired=False,
    )


@router.get(
    "/stats",
    response_model=StatisticsResponse,
    summary="Get statistics",
    description="Count stored, live and expired short URLs.",
)
async def get_statistics(request: Request):
    """Get service statistics."""
    service = request.app.state.service

    try:
        statistics = service.get_statistics()
    except ShortenerError as e:
        raise HTTPException(status_code=status_for_error(e), detail=str(e))

    return StatisticsResponse(**statistics)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check that the url map can be read.",
)
async def health_check(request: Request):
    """Health check endpoint."""
    service = request.app.state.service

    health = service.health_check()

    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        store="healthy" if health["store"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
