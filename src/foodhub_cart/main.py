from __future__ import annotations

import asyncio
import sys

import uvicorn

from foodhub_cart.adapters.inbound.cli import run_cli
from foodhub_cart.bootstrap import build_storefront
from foodhub_cart.config import get_settings, setup_logging


def main(argv: list[str] | None = None) -> int:
    argv = argv or sys.argv[1:]
    if not argv:
        print("usage: foodhub-cart '<json>'")
        return 2

    settings = get_settings()
    setup_logging(settings)
    storefront = build_storefront(settings)
    return asyncio.run(
        run_cli(
            argv[0],
            cart=storefront.cart,
            identity=storefront.identity,
            submit_order=storefront.submit_order,
            on_exit=storefront.aclose,
        )
    )


def serve() -> None:
    settings = get_settings()
    uvicorn.run(
        "foodhub_cart.asgi:create_asgi_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=False,
    )


if __name__ == "__main__":
    raise SystemExit(main())
