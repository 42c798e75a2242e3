"""Tests that simultaneous submissions against one url map do not lose entries."""

import asyncio
import pytest
from httpx import ASGITransport, AsyncClient

from shortener.service import URLShortenerService
from shortener_web import create_app


@pytest.fixture
def file_app(file_store, short_code_generator, config, logger, clock):
    """App backed by a JSON document on disk."""
    service = URLShortenerService(
        store=file_store,
        short_code_generator=short_code_generator,
        logger=logger,
        clock=clock,
    )
    return create_app(
        store_instance=file_store,
        service_instance=service,
        config=config,
        logger=logger,
    )


@pytest.fixture
async def file_client(file_app):
    async with AsyncClient(transport=ASGITransport(app=file_app), base_url="http://testserver") as ac:
        yield ac


@pytest.mark.asyncio
class TestConcurrentSubmissions:
    """Prove concurrent requests see each other's writes."""

    async def test_concurrent_shorten_keeps_every_entry(self, file_client, file_store):
        concurrency = 20
        tasks = [
            file_client.post(
                "/api/shorten",
                json={"entries": [{"url": f"https://example.com/{i}", "shortcode": f"code{i}"}]},
            )
            for i in range(concurrency)
        ]
        responses = await asyncio.gather(*tasks)

        assert all(r.status_code == 200 for r in responses)
        stored = file_store.load()
        assert len(stored) == concurrency
        assert stored["code7"].original_url == "https://example.com/7"

    async def test_concurrent_same_shortcode_only_one_wins(self, file_client, file_store):
        tasks = [
            file_client.post(
                "/api/shorten",
                json={"entries": [{"url": f"https://example.com/{i}", "shortcode": "contested"}]},
            )
            for i in range(10)
        ]
        responses = await asyncio.gather(*tasks)

        statuses = sorted(r.status_code for r in responses)
        assert statuses == [200] + [409] * 9
        assert list(file_store.load()) == ["contested"]

    async def test_concurrent_resolve(self, file_client):
        await file_client.post(
            "/api/shorten",
            json={"entries": [{"url": "https://example.com/hot", "shortcode": "hot"}]},
        )

        responses = await asyncio.gather(
            *[file_client.get("/hot", follow_redirects=False) for _ in range(25)]
        )

        assert all(r.status_code == 302 for r in responses)
        assert all(r.headers["location"] == "https://example.com/hot" for r in responses)
