"""
Tests for the provider HTTP clients.

Each client talks to a local aiohttp test server standing in for the real
provider, so request shapes and error mapping are checked end to end.
"""

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from conftest import audius_item, books_item, youtube_item
from mindfresh.api import (
    AudiusClient,
    GoogleBooksClient,
    SupabaseMoodStore,
    YouTubeRelayClient,
    YouTubeSearchClient,
)
from mindfresh.api.exceptions import (
    ProviderConfigurationError,
    ProviderPayloadError,
    ProviderTransportError,
)


class FakeProviders:
    """Records incoming requests and serves canned provider responses."""

    def __init__(self):
        self.requests = []
        self.relay_response = (200, {"items": [youtube_item("v1")]})
        self.mood_rows = [{"mood_value": 3}]

    def _record(self, request, body=None):
        self.requests.append({
            "path": request.path,
            "method": request.method,
            "query": dict(request.query),
            "headers": dict(request.headers),
            "body": body,
        })

    async def audius_search(self, request):
        self._record(request)
        return web.json_response({"data": [audius_item("t1", 90)]})

    async def books_volumes(self, request):
        self._record(request)
        return web.json_response({"items": [books_item("b1")]})

    async def youtube_search(self, request):
        self._record(request)
        if request.query.get("key") == "bad-key":
            return web.json_response(
                {"error": {"code": 403, "message": "The request cannot be completed because you have exceeded your quota."}},
                status=403
            )
        return web.json_response({"items": [youtube_item("v1")]})

    async def relay(self, request):
        self._record(request, body=await request.json())
        status, body = self.relay_response
        return web.json_response(body, status=status)

    async def mood_table(self, request):
        self._record(request)
        return web.json_response(self.mood_rows)

    async def unavailable(self, request):
        self._record(request)
        return web.Response(status=503, text="Service Unavailable")

    async def not_json(self, request):
        self._record(request)
        return web.Response(status=200, text="<html>maintenance</html>", content_type="text/html")

    async def error_body(self, request):
        self._record(request)
        return web.json_response({"error": "app_name is required"})


@pytest.fixture
def providers():
    return FakeProviders()


@pytest_asyncio.fixture
async def server(providers):
    app = web.Application()
    app.router.add_get("/v1/tracks/search", providers.audius_search)
    app.router.add_get("/books/v1/volumes", providers.books_volumes)
    app.router.add_get("/youtube/v3/search", providers.youtube_search)
    app.router.add_post("/youtube-search", providers.relay)
    app.router.add_get("/rest/v1/moodTable", providers.mood_table)
    app.router.add_get("/down/v1/tracks/search", providers.unavailable)
    app.router.add_get("/html/v1/tracks/search", providers.not_json)
    app.router.add_get("/err/v1/tracks/search", providers.error_body)

    test_server = TestServer(app)
    await test_server.start_server()
    yield test_server
    await test_server.close()


def url(server, path=""):
    return str(server.make_url(path))


class TestAudiusClient:

    @pytest.mark.asyncio
    async def test_search_sends_query_limit_and_app_name(self, server, providers):
        async with AudiusClient(app_name="mindfresh", base_url=url(server)) as client:
            data = await client.search_tracks("chill peaceful calm", limit=20)

        assert data["data"][0]["id"] == "t1"
        request = providers.requests[0]
        assert request["path"] == "/v1/tracks/search"
        assert request["query"] == {"query": "chill peaceful calm", "limit": "20", "app_name": "mindfresh"}
        assert request["headers"]["User-Agent"] == "Mindfresh-Audius/1.0"

    def test_stream_url(self):
        client = AudiusClient(app_name="mind fresh", base_url="https://audius.test/")

        assert client.stream_url("a/b") == "https://audius.test/v1/tracks/a%2Fb/stream?app_name=mind%20fresh"

    @pytest.mark.asyncio
    async def test_error_status_raises_transport_error(self, server):
        async with AudiusClient(base_url=url(server, "/down")) as client:
            with pytest.raises(ProviderTransportError) as exc_info:
                await client.search_tracks("q")

        assert exc_info.value.status == 503
        assert exc_info.value.service == "Audius"

    @pytest.mark.asyncio
    async def test_unreadable_body_raises_payload_error(self, server):
        async with AudiusClient(base_url=url(server, "/html")) as client:
            with pytest.raises(ProviderPayloadError):
                await client.search_tracks("q")

    @pytest.mark.asyncio
    async def test_error_in_body_raises_payload_error(self, server):
        async with AudiusClient(base_url=url(server, "/err")) as client:
            with pytest.raises(ProviderPayloadError, match="app_name is required"):
                await client.search_tracks("q")

    @pytest.mark.asyncio
    async def test_unreachable_host_raises_transport_error(self, server):
        base = url(server)
        await server.close()

        async with AudiusClient(base_url=base) as client:
            with pytest.raises(ProviderTransportError) as exc_info:
                await client.search_tracks("q")

        assert exc_info.value.status is None

    @pytest.mark.asyncio
    async def test_request_outside_context_manager(self):
        client = AudiusClient()

        with pytest.raises(RuntimeError, match="not initialized"):
            await client.search_tracks("q")

    def test_service_info(self):
        info = AudiusClient(timeout=5).get_service_info()

        assert info["service_name"] == "Audius"
        assert info["timeout"] == 5
        assert info["session_active"] is False


class TestGoogleBooksClient:

    @pytest.mark.asyncio
    async def test_search_volumes(self, server, providers):
        async with GoogleBooksClient(base_url=url(server, "/books/v1")) as client:
            data = await client.search_volumes("psychology happiness mindfulness", max_results=6)

        assert data["items"][0]["id"] == "b1"
        assert providers.requests[0]["query"] == {"q": "psychology happiness mindfulness", "maxResults": "6"}


class TestYouTubeSearchClient:

    @pytest.mark.asyncio
    async def test_search_injects_key(self, server, providers):
        async with YouTubeSearchClient(api_key="secret", base_url=url(server, "/youtube/v3")) as client:
            data = await client.search_videos("calm", max_results=6)

        assert data["items"][0]["id"]["videoId"] == "v1"
        assert providers.requests[0]["query"] == {
            "part": "snippet",
            "q": "calm",
            "type": "video",
            "maxResults": "6",
            "key": "secret",
        }

    @pytest.mark.asyncio
    async def test_missing_key_fails_without_a_request(self, server, providers):
        async with YouTubeSearchClient(api_key=None, base_url=url(server, "/youtube/v3")) as client:
            with pytest.raises(ProviderConfigurationError):
                await client.search_videos("calm")

        assert providers.requests == []

    @pytest.mark.asyncio
    async def test_upstream_status_is_kept(self, server):
        async with YouTubeSearchClient(api_key="bad-key", base_url=url(server, "/youtube/v3")) as client:
            with pytest.raises(ProviderTransportError) as exc_info:
                await client.search_videos("calm")

        assert exc_info.value.status == 403


class TestYouTubeRelayClient:

    @pytest.mark.asyncio
    async def test_posts_query(self, server, providers):
        async with YouTubeRelayClient(relay_url=url(server, "/youtube-search")) as client:
            data = await client.search_videos("mental health therapy mindfulness")

        assert data["items"][0]["id"]["videoId"] == "v1"
        request = providers.requests[0]
        assert request["method"] == "POST"
        assert request["body"] == {"query": "mental health therapy mindfulness"}

    @pytest.mark.asyncio
    async def test_relay_without_key_is_a_configuration_error(self, server, providers):
        providers.relay_response = (
            500, {"error": "YouTube API key not configured", "code": "relay_not_configured"}
        )

        async with YouTubeRelayClient(relay_url=url(server, "/youtube-search")) as client:
            with pytest.raises(ProviderConfigurationError, match="YouTube API key not configured"):
                await client.search_videos("calm")

    @pytest.mark.asyncio
    async def test_relay_failure_keeps_status(self, server, providers):
        providers.relay_response = (403, {"error": "Failed to fetch YouTube videos"})

        async with YouTubeRelayClient(relay_url=url(server, "/youtube-search")) as client:
            with pytest.raises(ProviderTransportError) as exc_info:
                await client.search_videos("calm")

        assert exc_info.value.status == 403
        assert "Failed to fetch YouTube videos" in str(exc_info.value)


class TestSupabaseMoodStore:

    @pytest.mark.asyncio
    async def test_fetches_latest_reading(self, server, providers):
        async with SupabaseMoodStore(url=url(server), anon_key="anon-key") as store:
            reading = await store.fetch_latest_mood("user-1")

        assert reading.value == 3
        request = providers.requests[0]
        assert request["query"] == {
            "select": "mood_value",
            "user_id": "eq.user-1",
            "order": "created_at.desc",
            "limit": "1",
        }
        assert request["headers"]["apikey"] == "anon-key"
        assert request["headers"]["Authorization"] == "Bearer anon-key"

    @pytest.mark.asyncio
    async def test_no_rows_means_no_reading(self, server, providers):
        providers.mood_rows = []

        async with SupabaseMoodStore(url=url(server), anon_key="anon-key") as store:
            assert await store.fetch_latest_mood("user-1") is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("row", [{"mood_value": 0}, {"mood_value": 11}, {"mood_value": None}, {}])
    async def test_out_of_range_reading_is_ignored(self, server, providers, row):
        providers.mood_rows = [row]

        async with SupabaseMoodStore(url=url(server), anon_key="anon-key") as store:
            assert await store.fetch_latest_mood("user-1") is None
