from __future__ import annotations

import json
from typing import Any, Awaitable, Callable

from returns.result import Success

from foodhub_cart.adapters.outbound.session_identity import SessionIdentityProvider
from foodhub_cart.core.domain.model.cart import Cart
from foodhub_cart.core.domain.model.identity import Identity
from foodhub_cart.core.domain.model.menu import MenuItem
from foodhub_cart.core.domain.model.money import Money
from foodhub_cart.core.ports.inbound.submit_order import SubmitOrderUseCase


async def run_cli(
    raw: str,
    cart: Cart,
    identity: SessionIdentityProvider,
    submit_order: SubmitOrderUseCase,
    on_exit: Callable[[], Awaitable[None]] | None = None,
) -> int:
    """
    raw: JSON string.
    Example:
      {"user":{"user_id":"u-1","name":"Asha","token":"t0k"},
       "items":[{"id":1,"name":"Butter Chicken","price":"250","quantity":2}]}
    """
    try:
        try:
            payload = json.loads(raw)
            user, items = _parse_payload(payload, currency=cart.currency)
        except Exception as e:  # noqa: BLE001
            print(f"invalid_input: {e}")
            return 2

        if user is not None:
            identity.login(user)
        for item, quantity in items:
            cart.add(item)
            cart.set_quantity(item.id, quantity)

        snapshot = cart.snapshot
        print(
            "[cart]",
            {
                "lines": len(snapshot.items),
                "item_count": snapshot.item_count,
                "subtotal": str(snapshot.subtotal.amount),
                "currency": snapshot.subtotal.currency,
            },
        )

        result = await submit_order.submit()
        status = submit_order.view().status
        message = status.message if status is not None else ""

        if isinstance(result, Success):
            print("[ok]", {"order_id": result.unwrap().order_id, "message": message})
            return 0

        print("[ng]", {"error": type(result.failure()).__name__, "message": message})
        return 1
    finally:
        if on_exit is not None:
            await on_exit()


def _parse_payload(
    payload: dict[str, Any], currency: str
) -> tuple[Identity | None, list[tuple[MenuItem, int]]]:
    raw_user = payload.get("user")
    user = None
    if raw_user:
        user = Identity(
            user_id=str(raw_user["user_id"]),
            name=str(raw_user.get("name", "")),
            token=raw_user.get("token"),
        )

    # repeated ids add up; the first occurrence supplies name and price
    items: dict[int, tuple[MenuItem, int]] = {}
    for x in payload.get("items", []):
        item_id = int(x["id"])
        quantity = int(x.get("quantity", 1))
        if item_id in items:
            item, seen = items[item_id]
            items[item_id] = (item, seen + quantity)
            continue
        price = Money.of(str(x["price"]), currency=currency)
        if price.amount < 0:
            raise ValueError(f"price must be >= 0 for item {item_id}")
        items[item_id] = (MenuItem(id=item_id, name=str(x["name"]), price=price), quantity)
    return user, list(items.values())
