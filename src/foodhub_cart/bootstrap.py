from __future__ import annotations

from dataclasses import dataclass

import httpx

from foodhub_cart.adapters.outbound.http_catalog import HttpMenuCatalog
from foodhub_cart.adapters.outbound.http_orders import HttpOrderService
from foodhub_cart.adapters.outbound.in_memory_catalog import InMemoryCatalog
from foodhub_cart.adapters.outbound.in_memory_orders import InMemoryOrderService
from foodhub_cart.adapters.outbound.session_identity import SessionIdentityProvider
from foodhub_cart.config import Settings, get_settings
from foodhub_cart.core.domain.model.cart import Cart
from foodhub_cart.core.domain.model.menu import MenuItem, Restaurant
from foodhub_cart.core.domain.model.money import Money
from foodhub_cart.core.domain.service.browse_menu_service import (
    BrowseMenuDeps,
    BrowseMenuService,
)
from foodhub_cart.core.domain.service.manage_cart_service import (
    ManageCartDeps,
    ManageCartService,
)
from foodhub_cart.core.domain.service.submit_order_service import (
    SubmitOrderDeps,
    SubmitOrderService,
)
from foodhub_cart.core.ports.outbound.catalog import MenuCatalog
from foodhub_cart.core.ports.outbound.orders import OrderService


@dataclass(frozen=True)
class Storefront:
    """Everything one ordering session needs, wired around a single cart."""

    cart: Cart
    identity: SessionIdentityProvider
    browse_menu: BrowseMenuService
    manage_cart: ManageCartService
    submit_order: SubmitOrderService
    http_client: httpx.AsyncClient | None = None

    async def aclose(self) -> None:
        if self.http_client is not None:
            await self.http_client.aclose()


def build_storefront(
    settings: Settings | None = None,
    catalog: MenuCatalog | None = None,
    orders: OrderService | None = None,
) -> Storefront:
    settings = settings or get_settings()
    cart = Cart(currency=settings.currency)
    identity = SessionIdentityProvider()

    client: httpx.AsyncClient | None = None
    if settings.use_in_memory_services:
        catalog = catalog or demo_catalog(settings.currency)
        orders = orders or InMemoryOrderService()
    elif catalog is None or orders is None:
        client = httpx.AsyncClient(
            base_url=settings.api_base_url,
            timeout=settings.request_timeout_seconds,
        )
        catalog = catalog or HttpMenuCatalog(client, currency=settings.currency)
        orders = orders or HttpOrderService(client, identity)

    return Storefront(
        cart=cart,
        identity=identity,
        browse_menu=BrowseMenuService(BrowseMenuDeps(catalog=catalog)),
        manage_cart=ManageCartService(ManageCartDeps(cart=cart, catalog=catalog)),
        submit_order=SubmitOrderService(
            SubmitOrderDeps(
                identity=identity,
                orders=orders,
                timeout_seconds=settings.request_timeout_seconds,
            ),
            cart,
        ),
        http_client=client,
    )


def demo_catalog(currency: str = "INR") -> InMemoryCatalog:
    def item(item_id: int, name: str, price: str, description: str | None = None) -> MenuItem:
        return MenuItem(item_id, name, Money.of(price, currency=currency), description)

    return InMemoryCatalog.of(
        Restaurant(
            id=1,
            name="Spice Route",
            cuisine="North Indian",
            location="Connaught Place",
            menu=(
                item(1, "Butter Chicken", "250", "Slow-cooked in tomato gravy"),
                item(2, "Garlic Naan", "99"),
                item(3, "Dal Makhani", "180"),
            ),
        ),
        Restaurant(
            id=2,
            name="Slice of Napoli",
            cuisine="Italian",
            location="Indiranagar",
            menu=(
                item(10, "Margherita", "320"),
                item(11, "Tiramisu", "210", "Mascarpone and espresso"),
            ),
        ),
    )
