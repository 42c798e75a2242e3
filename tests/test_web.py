"""Tests for the HTML form and the redirect resolver."""

import pytest
from httpx import ASGITransport, AsyncClient

from shortener.service import URLShortenerService
from shortener.store import MemoryStore
from shortener_web import create_app


@pytest.mark.asyncio
class TestForm:
    """Test the submission form."""

    async def test_homepage(self, client):
        response = await client.get("/")

        assert response.status_code == 200
        assert "URL Shortener" in response.text
        assert response.text.count('name="url"') == 1

    async def test_homepage_rows(self, client):
        response = await client.get("/?rows=3")

        assert response.text.count('name="url"') == 3

    async def test_homepage_rows_capped(self, client):
        response = await client.get("/?rows=50")

        assert response.text.count('name="url"') == 5

    async def test_add_row_keeps_values(self, client):
        response = await client.post(
            "/",
            data={"url": "https://example.com", "validity": "5", "shortcode": "mine", "action": "add"},
        )

        assert response.status_code == 200
        assert response.text.count('name="url"') == 2
        assert 'value="https://example.com"' in response.text
        assert 'value="mine"' in response.text

    async def test_add_row_stops_at_five(self, client):
        response = await client.post(
            "/",
            data={
                "url": [f"https://example.com/{i}" for i in range(5)],
                "validity": [""] * 5,
                "shortcode": [""] * 5,
                "action": "add",
            },
        )

        assert response.text.count('name="url"') == 5
        assert " disabled" in response.text

    async def test_submit_creates_short_urls(self, client, memory_store):
        response = await client.post(
            "/",
            data={
                "url": ["https://example.com", "https://example.org"],
                "validity": ["1", ""],
                "shortcode": ["abc123", ""],
                "action": "shorten",
            },
        )

        assert response.status_code == 200
        assert "Shortened URLs" in response.text
        assert "http://testserver/abc123" in response.text
        assert "2024-01-01 12:01:00 UTC" in response.text

        stored = memory_store.load()
        assert len(stored) == 2
        assert stored["abc123"].original_url == "https://example.com"

    async def test_submit_invalid_url_shows_alert(self, client, memory_store):
        response = await client.post(
            "/",
            data={
                "url": ["https://example.com", "not-a-url"],
                "validity": ["", ""],
                "shortcode": ["", ""],
            },
        )

        assert response.status_code == 400
        assert 'role="alert"' in response.text
        assert "Invalid URL: not-a-url" in response.text
        assert 'value="not-a-url"' in response.text
        assert memory_store.load() == {}

    async def test_submit_duplicate_shows_alert(self, client, service):
        service.shorten("https://example.com", shortcode="taken")

        response = await client.post(
            "/",
            data={"url": "https://example.org", "validity": "", "shortcode": "taken"},
        )

        assert response.status_code == 409
        assert "Shortcode already in use: taken" in response.text

    async def test_submit_out_of_range_validity_shows_alert(self, client, memory_store):
        response = await client.post(
            "/",
            data={"url": "https://example.com", "validity": "99999999999", "shortcode": "big1"},
        )

        assert response.status_code == 400
        assert 'role="alert"' in response.text
        assert "Invalid validity: 99999999999" in response.text
        assert memory_store.load() == {}

    async def test_submit_escapes_input(self, client):
        response = await client.post(
            "/",
            data={"url": "<script>x</script>", "validity": "", "shortcode": ""},
        )

        assert response.status_code == 400
        assert "<script>x</script>" not in response.text


@pytest.mark.asyncio
class TestRedirect:
    """Test shortcode resolution."""

    async def test_redirect(self, client, service):
        service.shorten("https://example.com/target", validity="1", shortcode="abc123")

        response = await client.get("/abc123", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "https://example.com/target"

    async def test_redirect_expired(self, client, service, clock):
        service.shorten("https://example.com/target", validity="1", shortcode="abc123")
        clock.advance(minutes=2)

        response = await client.get("/abc123", follow_redirects=False)

        assert response.status_code == 404
        assert "Short URL expired or not found" in response.text

    async def test_redirect_unknown_matches_expired(self, client, service, clock):
        service.shorten("https://example.com/target", validity="1", shortcode="abc123")
        clock.advance(minutes=2)

        expired = await client.get("/abc123", follow_redirects=False)
        unknown = await client.get("/zzz999", follow_redirects=False)

        assert expired.status_code == unknown.status_code == 404
        assert expired.text == unknown.text

    async def test_form_then_redirect(self, client):
        await client.post(
            "/",
            data={"url": "https://example.com/flow", "validity": "", "shortcode": "flow"},
        )

        response = await client.get("/flow", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "https://example.com/flow"


@pytest.mark.asyncio
async def test_unreadable_store_is_server_error(config, logger):
    store = MemoryStore(initial="{not json")
    service = URLShortenerService(store=store, logger=logger)
    app = create_app(store_instance=store, service_instance=service, config=config, logger=logger)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        response = await ac.post("/", data={"url": "https://example.com", "validity": "", "shortcode": ""})

    assert response.status_code == 500
    assert 'role="alert"' in response.text
