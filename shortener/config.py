"""Configuration management for URL shortener."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field

from .common.validators import MAX_VALIDITY_MINUTES


class Config(BaseSettings):
    """Application configuration."""

    # Storage settings
    storage_path: Optional[str] = Field(
        default="url_shortener_data.json",
        description="JSON document holding the url map (in-memory store if empty)"
    )

    storage_key: str = Field(
        default="urlMap",
        min_length=1,
        description="Key the url map is stored under inside the document"
    )

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=9200,
        description="Port to listen on"
    )

    # URL shortener settings
    base_url: str = Field(
        default="http://localhost:9200",
        description="Base URL for short links when the request does not say"
    )

    short_code_length: int = Field(
        default=6,
        ge=1,
        le=20,
        description="Length of generated short codes"
    )

    default_validity_minutes: int = Field(
        default=30,
        ge=1,
        le=MAX_VALIDITY_MINUTES,
        description="Validity used when an entry gives none (or a non-numeric one)"
    )

    max_batch_size: int = Field(
        default=5,
        ge=1,
        description="Maximum number of URLs per submission"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    access_log_file: Optional[str] = Field(
        default=None,
        description="Append one line per request to this file"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }


def load_config(**overrides) -> Config:
    """Load configuration from environment."""
    return Config(**overrides)
