from __future__ import annotations

import pytest

from foodhub_cart.bootstrap import build_storefront
from foodhub_cart.config import Settings


def test_settings_read_prefixed_env(monkeypatch):
    monkeypatch.setenv("FOODHUB_API_BASE_URL", "http://api.example:8080")
    monkeypatch.setenv("FOODHUB_REQUEST_TIMEOUT_SECONDS", "2.5")

    settings = Settings()

    assert settings.api_base_url == "http://api.example:8080"
    assert settings.request_timeout_seconds == 2.5
    assert settings.currency == "INR"


def test_timeout_must_be_positive():
    with pytest.raises(ValueError):
        Settings(request_timeout_seconds=0)


async def test_http_storefront_owns_its_client():
    storefront = build_storefront(Settings(api_base_url="http://api.test"))

    assert storefront.http_client is not None
    assert storefront.http_client.base_url.host == "api.test"
    assert storefront.submit_order.deps.timeout_seconds == 10.0

    await storefront.aclose()
    assert storefront.http_client.is_closed
