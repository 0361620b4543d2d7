"""
Mindfresh Configuration

Provider endpoints, credentials and runtime settings, resolved from the
environment. Call load_dotenv() before from_env() to pick up a .env file.
"""

import os
from typing import Optional

from pydantic import BaseModel, Field


class MindfreshConfig(BaseModel):
    """Overall system configuration"""

    # Track provider
    audius_base_url: str = Field(
        default="https://discoveryprovider.audius.co",
        description="Audius discovery provider"
    )
    audius_app_name: str = Field(default="mindfresh", description="app_name sent to Audius")

    # Video relay
    youtube_relay_url: str = Field(
        default="http://127.0.0.1:8000/youtube-search",
        description="Trusted relay endpoint for YouTube search"
    )
    youtube_api_key: Optional[str] = Field(
        default=None,
        description="YouTube Data API key, only read by the relay"
    )

    # Book provider
    google_books_base_url: str = Field(
        default="https://www.googleapis.com/books/v1",
        description="Google Books API root"
    )

    # Mood store
    supabase_url: Optional[str] = Field(default=None, description="Supabase project URL")
    supabase_anon_key: Optional[str] = Field(default=None, description="Supabase anon key")

    # HTTP
    request_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Total timeout per provider request in seconds, unset for none"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_dir: Optional[str] = Field(default=None, description="Directory for rotating log files")

    # Relay server
    relay_host: str = Field(default="127.0.0.1", description="Relay bind host")
    relay_port: int = Field(default=8000, description="Relay bind port")

    @property
    def has_mood_store(self) -> bool:
        return bool(self.supabase_url and self.supabase_anon_key)

    @classmethod
    def from_env(cls) -> "MindfreshConfig":
        """Build configuration from environment variables, falling back to defaults."""
        values = {
            "audius_base_url": os.getenv("AUDIUS_BASE_URL"),
            "audius_app_name": os.getenv("AUDIUS_APP_NAME"),
            "youtube_relay_url": os.getenv("YOUTUBE_RELAY_URL"),
            "youtube_api_key": os.getenv("YOUTUBE_API_KEY"),
            "google_books_base_url": os.getenv("GOOGLE_BOOKS_BASE_URL"),
            "supabase_url": os.getenv("SUPABASE_URL"),
            "supabase_anon_key": os.getenv("SUPABASE_ANON_KEY"),
            "request_timeout": os.getenv("MINDFRESH_REQUEST_TIMEOUT"),
            "log_level": os.getenv("LOG_LEVEL"),
            "log_dir": os.getenv("LOG_DIR"),
            "relay_host": os.getenv("RELAY_HOST"),
            "relay_port": os.getenv("RELAY_PORT"),
        }
        # Unset and empty variables keep the field default
        return cls(**{key: value for key, value in values.items() if value})
