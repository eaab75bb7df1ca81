"""Configuration management -- reads from environment with sensible defaults."""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


@dataclass(frozen=True)
class Settings:
    """Centralised settings read once from env vars."""

    # --- Search API --------------------------------------------------------
    api_endpoint: str = field(
        default_factory=lambda: os.getenv(
            "STORIES_API_ENDPOINT", "https://hn.algolia.com/api/v1/search?query="
        )
    )
    default_query: str = field(default_factory=lambda: os.getenv("DEFAULT_QUERY", "React"))
    # None means wait forever
    http_timeout: Optional[float] = field(default_factory=lambda: _optional_float("HTTP_TIMEOUT"))

    # --- Storage -----------------------------------------------------------
    search_storage_key: str = field(
        default_factory=lambda: os.getenv("SEARCH_STORAGE_KEY", "search")
    )
    storage_backend: str = field(default_factory=lambda: os.getenv("STORAGE_BACKEND", "file"))
    storage_path: str = field(
        default_factory=lambda: os.getenv(
            "STORAGE_PATH", os.path.join("~", ".hacker_stories", "storage.json")
        )
    )

    # --- Redis -------------------------------------------------------------
    redis_host: str = field(default_factory=lambda: os.getenv("REDIS_HOST", "localhost"))
    redis_port: int = field(default_factory=lambda: int(os.getenv("REDIS_PORT", "6379")))
    redis_password: str = field(default_factory=lambda: os.getenv("REDIS_PASSWORD", ""))
    redis_key_prefix: str = field(
        default_factory=lambda: os.getenv("REDIS_KEY_PREFIX", "hacker_stories:")
    )

    # --- Logging -----------------------------------------------------------
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(
        default_factory=lambda: os.getenv("LOG_FILE", "logs/hacker_stories.log")
    )


# Module-level singleton -- import this everywhere.
settings = Settings()
