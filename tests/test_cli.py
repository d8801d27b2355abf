from __future__ import annotations

import json

from foodhub_cart.adapters.inbound.cli import run_cli
from foodhub_cart.adapters.outbound.in_memory_orders import InMemoryOrderService
from foodhub_cart.bootstrap import build_storefront
from foodhub_cart.config import Settings
from foodhub_cart.core.domain.model.errors import NetworkError
from foodhub_cart.core.domain.model.submission import OrderLine

PAYLOAD = {
    "user": {"user_id": "u-1", "name": "Asha", "token": "tok"},
    "items": [
        {"id": 1, "name": "Butter Chicken", "price": "250", "quantity": 2},
        {"id": 2, "name": "Garlic Naan", "price": 99},
    ],
}


async def _run(payload, orders: InMemoryOrderService) -> int:
    storefront = build_storefront(Settings(use_in_memory_services=True), orders=orders)
    raw = payload if isinstance(payload, str) else json.dumps(payload)
    return await run_cli(
        raw,
        cart=storefront.cart,
        identity=storefront.identity,
        submit_order=storefront.submit_order,
        on_exit=storefront.aclose,
    )


async def test_places_order(capsys):
    orders = InMemoryOrderService()

    code = await _run(PAYLOAD, orders)

    out = capsys.readouterr().out
    assert code == 0
    assert "'subtotal': '599.00'" in out
    assert "[ok]" in out
    assert orders.calls == [(OrderLine(1, 2), OrderLine(2, 1))]


async def test_anonymous_user_is_refused(capsys):
    orders = InMemoryOrderService()

    code = await _run(dict(PAYLOAD, user=None), orders)

    out = capsys.readouterr().out
    assert code == 1
    assert "NotAuthenticated" in out
    assert orders.calls == []


async def test_remote_failure_reports_ng(capsys):
    code = await _run(PAYLOAD, InMemoryOrderService(fail_with=NetworkError("offline")))

    out = capsys.readouterr().out
    assert code == 1
    assert "Failed to place order" in out


async def test_invalid_json(capsys):
    code = await _run("{not json", InMemoryOrderService())

    assert code == 2
    assert "invalid_input" in capsys.readouterr().out


async def test_repeated_item_ids_add_up(capsys):
    orders = InMemoryOrderService()
    payload = dict(
        PAYLOAD,
        items=[
            {"id": 2, "name": "Garlic Naan", "price": 99, "quantity": 2},
            {"id": 1, "name": "Butter Chicken", "price": "250"},
            {"id": 2, "name": "Garlic Naan", "price": 99, "quantity": 3},
        ],
    )

    code = await _run(payload, orders)

    assert code == 0
    assert "'subtotal': '745.00'" in capsys.readouterr().out
    assert orders.calls == [(OrderLine(2, 5), OrderLine(1, 1))]
