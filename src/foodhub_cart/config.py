"""
Runtime configuration and logging setup.

Values come from ``FOODHUB_*`` environment variables or a ``.env`` file,
e.g. ``FOODHUB_API_BASE_URL=http://localhost:5000``.
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FOODHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ---- remote API ---------------------------------------------------------

    api_base_url: str = Field(
        default="http://localhost:5000",
        description="Base URL of the restaurant/order API",
    )
    request_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Upper bound for a single order submission",
    )
    use_in_memory_services: bool = Field(
        default=False,
        description="Serve a demo catalog and accept orders locally instead of calling the API",
    )

    # ---- pricing ------------------------------------------------------------

    currency: str = Field(default="INR", min_length=3, max_length=3)

    # ---- storefront server --------------------------------------------------

    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """Configure root logging once; DEBUG when ``settings.debug`` is set."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)-40s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return logging.getLogger("foodhub_cart")
