from __future__ import annotations

from fastapi import FastAPI

from foodhub_cart.adapters.inbound.web.fastapi_app import create_app
from foodhub_cart.bootstrap import build_storefront
from foodhub_cart.config import get_settings, setup_logging


def create_asgi_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings)
    storefront = build_storefront(settings)
    return create_app(
        storefront.browse_menu,
        storefront.manage_cart,
        storefront.submit_order,
        identity=storefront.identity,
        on_shutdown=storefront.aclose,
    )
