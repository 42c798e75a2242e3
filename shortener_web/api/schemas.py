"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import List, Optional, Union
from datetime import datetime


class ShortenEntryRequest(BaseModel):
    """One URL to shorten."""

    url: str = Field(..., description="The URL to shorten")
    validity: Optional[Union[int, str]] = Field(
        None, description="Validity in minutes (defaults to 30)"
    )
    shortcode: Optional[str] = Field(None, description="Optional custom shortcode")


class ShortenRequest(BaseModel):
    """Request to shorten a batch of URLs."""

    entries: List[ShortenEntryRequest] = Field(
        ..., description="URLs to shorten, committed all or nothing"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "entries": [
                        {"url": "https://example.com", "validity": 1, "shortcode": "abc123"},
                        {"url": "https://github.com/user/repo"},
                    ]
                }
            ]
        }
    }


class ShortenResultResponse(BaseModel):
    """One committed short URL."""

    shortcode: str = Field(..., description="The shortcode")
    short_url: str = Field(..., description="The complete short URL")
    original_url: str = Field(..., description="The original long URL")
    expiry: datetime = Field(..., description="Expiry timestamp (UTC)")


class ShortenResponse(BaseModel):
    """Response after shortening a batch."""

    results: List[ShortenResultResponse]


class URLInfoResponse(BaseModel):
    """Response with URL information."""

    shortcode: str
    short_url: str
    original_url: str
    expiry: datetime
    expired: bool


class URLListResponse(BaseModel):
    """All stored entries."""

    urls: List[URLInfoResponse]


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    store: str = Field(..., description="Store status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""

    detail: str = Field(..., description="Error message")


class StatisticsResponse(BaseModel):
    """Statistics response."""

    total_urls: int
    active_urls: int
    expired_urls: int
