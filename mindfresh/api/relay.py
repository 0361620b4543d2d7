"""
FastAPI Video Search Relay for Mindfresh

Untrusted clients cannot hold the YouTube Data API key, so they post their
query here. The relay injects the key, calls YouTube search and passes the
raw JSON back. Error contract:

- 400 {"error": "Query parameter is required"} for a missing or non-string query
- 500 {"error": "YouTube API key not configured"} when the key is absent
- upstream status with {"error": "Failed to fetch YouTube videos"} when YouTube fails
- 500 {"error": "Internal server error"} for anything else
"""

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .client_factory import APIClientFactory
from .exceptions import ProviderConfigurationError, ProviderTransportError
from .logging_middleware import LoggingMiddleware
from .youtube_client import RELAY_NOT_CONFIGURED, YouTubeSearchClient
from ..config import MindfreshConfig
from ..utils.logging_config import get_logger, log_error

logger = get_logger(__name__)

SEARCH_PAGE_SIZE = 6

CORS_ALLOWED_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


def _error_response(status_code: int, message: str, code: Optional[str] = None) -> JSONResponse:
    body: Dict[str, Any] = {"error": message}
    if code:
        body["code"] = code
    return JSONResponse(status_code=status_code, content=body)


def create_relay_app(
    config: Optional[MindfreshConfig] = None,
    youtube_client: Optional[YouTubeSearchClient] = None
) -> FastAPI:
    """
    Build the relay application.

    Args:
        config: System configuration (defaults to the environment)
        youtube_client: Pre-built client to use instead of creating one; the
            caller then owns its session

    Returns:
        Configured FastAPI app
    """
    config = config or MindfreshConfig.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if youtube_client is not None:
            app.state.youtube_client = youtube_client
            yield
            return

        client = APIClientFactory(config).create_youtube_search_client()
        async with client:
            app.state.youtube_client = client
            logger.info("Video search relay started", has_api_key=bool(config.youtube_api_key))
            yield
        logger.info("Video search relay stopped")

    app = FastAPI(
        title="Mindfresh Video Relay",
        description="Keeps the YouTube Data API key server-side",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["POST", "OPTIONS"],
        allow_headers=CORS_ALLOWED_HEADERS,
    )

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "youtube_api_key_configured": bool(config.youtube_api_key),
        }

    @app.post("/youtube-search")
    async def youtube_search(request: Request):
        try:
            payload = await request.json()
        except ValueError:
            payload = None

        query = payload.get("query") if isinstance(payload, dict) else None
        if not query or not isinstance(query, str):
            logger.warning("Relay request without a usable query")
            return _error_response(400, "Query parameter is required")

        client: YouTubeSearchClient = request.app.state.youtube_client
        try:
            data = await client.search_videos(query, max_results=SEARCH_PAGE_SIZE)

        except ProviderConfigurationError:
            logger.error("YOUTUBE_API_KEY not found in environment variables")
            return _error_response(500, "YouTube API key not configured", code=RELAY_NOT_CONFIGURED)

        except ProviderTransportError as e:
            if e.status is None:
                logger.error("Error in youtube-search relay", error=str(e))
                return _error_response(500, "Internal server error")
            logger.error("YouTube API Error", status=e.status, error=str(e))
            return _error_response(e.status, "Failed to fetch YouTube videos")

        except Exception as e:
            log_error(e, {"endpoint": "/youtube-search"})
            return _error_response(500, "Internal server error")

        return JSONResponse(status_code=200, content=data)

    return app
