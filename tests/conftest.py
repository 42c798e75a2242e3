"""Pytest configuration and fixtures."""

import pytest
from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator

from httpx import ASGITransport, AsyncClient

from shortener.config import Config
from shortener.service import URLShortenerService
from shortener.shortcode import ShortCodeGenerator
from shortener.store import JSONFileStore, MemoryStore
from shortener.common.logging_config import setup_logging
from shortener_web import create_app


class FrozenClock:
    """A clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def clock():
    """Fixed clock starting at 2024-01-01 12:00 UTC."""
    return FrozenClock(datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def file_store(tmp_path, logger):
    return JSONFileStore(path=str(tmp_path / "urls.json"), logger=logger)


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator(default_length=6)


@pytest.fixture
def service(memory_store, short_code_generator, logger, clock) -> URLShortenerService:
    """Create service instance."""
    return URLShortenerService(
        store=memory_store,
        short_code_generator=short_code_generator,
        logger=logger,
        clock=clock,
    )


@pytest.fixture
def config(tmp_path):
    return Config(
        storage_path=str(tmp_path / "urls.json"),
        base_url="http://testserver",
    )


@pytest.fixture
def app(memory_store, service, config, logger):
    """Create test FastAPI app."""
    return create_app(
        store_instance=memory_store,
        service_instance=service,
        config=config,
        logger=logger,
    )


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
