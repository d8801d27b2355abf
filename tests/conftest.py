from __future__ import annotations

import pytest

from foodhub_cart.adapters.outbound.in_memory_orders import InMemoryOrderService
from foodhub_cart.adapters.outbound.session_identity import SessionIdentityProvider
from foodhub_cart.core.domain.model.cart import Cart
from foodhub_cart.core.domain.model.identity import Identity
from foodhub_cart.core.domain.model.menu import MenuItem
from foodhub_cart.core.domain.model.money import Money
from foodhub_cart.core.domain.service.submit_order_service import (
    SubmitOrderDeps,
    SubmitOrderService,
)


@pytest.fixture
def curry() -> MenuItem:
    return MenuItem(id=1, name="Butter Chicken", price=Money.of("250"))


@pytest.fixture
def naan() -> MenuItem:
    return MenuItem(id=2, name="Garlic Naan", price=Money.of("99"))


@pytest.fixture
def cart() -> Cart:
    return Cart()


@pytest.fixture
def identity() -> SessionIdentityProvider:
    provider = SessionIdentityProvider()
    provider.login(Identity(user_id="u-1", name="Asha", token="tok-1"))
    return provider


@pytest.fixture
def orders() -> InMemoryOrderService:
    return InMemoryOrderService()


@pytest.fixture
def submit_service(
    identity: SessionIdentityProvider, orders: InMemoryOrderService, cart: Cart
) -> SubmitOrderService:
    return SubmitOrderService(
        SubmitOrderDeps(identity=identity, orders=orders, timeout_seconds=1.0), cart
    )
