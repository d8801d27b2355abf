from __future__ import annotations

import json

import httpx
import pytest
from returns.result import Success

from foodhub_cart.adapters.outbound.http_orders import UNKNOWN_ORDER_ID, HttpOrderService
from foodhub_cart.adapters.outbound.session_identity import SessionIdentityProvider
from foodhub_cart.core.domain.model.errors import (
    NetworkError,
    RejectedByServer,
    SubmissionTimeout,
)
from foodhub_cart.core.domain.model.submission import OrderCreated, OrderLine
from foodhub_cart.core.domain.service.submit_order_service import (
    SubmitOrderDeps,
    SubmitOrderService,
)

LINES = (OrderLine(menu_item_id=1, quantity=2), OrderLine(menu_item_id=2, quantity=1))


def _service(handler, identity) -> HttpOrderService:
    client = httpx.AsyncClient(
        base_url="http://orders.test", transport=httpx.MockTransport(handler)
    )
    return HttpOrderService(client=client, identity=identity)


async def test_posts_items_without_price_and_bearer_token(identity):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"id": 42, "status": "pending"})

    result = await _service(handler, identity).create_order(LINES)

    assert result == Success(OrderCreated(order_id="42"))
    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/api/orders"
    assert request.headers["Authorization"] == "Bearer tok-1"
    assert json.loads(request.content) == {
        "items": [
            {"menuItemId": 1, "quantity": 2},
            {"menuItemId": 2, "quantity": 1},
        ]
    }


async def test_no_authorization_header_without_token():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"id": "ord-9"})

    result = await _service(handler, SessionIdentityProvider()).create_order(LINES)

    assert result == Success(OrderCreated(order_id="ord-9"))
    assert "Authorization" not in seen[0].headers


@pytest.mark.parametrize("status_code", [400, 401, 409, 500, 503])
async def test_non_2xx_is_rejected_by_server(identity, status_code):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json={"error": "nope"})

    result = await _service(handler, identity).create_order(LINES)

    err = result.failure()
    assert isinstance(err, RejectedByServer)
    assert err.status_code == status_code


async def test_timeout_maps_to_submission_timeout(identity):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    result = await _service(handler, identity).create_order(LINES)

    assert isinstance(result.failure(), SubmissionTimeout)


async def test_connection_error_maps_to_network_error(identity):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    result = await _service(handler, identity).create_order(LINES)

    assert isinstance(result.failure(), NetworkError)


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(201, content=b"not json"),
        httpx.Response(201, json={"orderId": 1}),
    ],
)
async def test_unreadable_success_body_still_counts_as_created(identity, response):
    def handler(request: httpx.Request) -> httpx.Response:
        return response

    result = await _service(handler, identity).create_order(LINES)

    assert result == Success(OrderCreated(order_id=UNKNOWN_ORDER_ID))


async def test_unreadable_success_body_clears_cart_on_submit(cart, identity, curry):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(201, json={"orderId": 7})

    service = SubmitOrderService(
        SubmitOrderDeps(identity=identity, orders=_service(handler, identity)), cart
    )
    cart.add(curry)

    result = await service.submit()

    assert isinstance(result, Success)
    assert cart.is_empty()
    assert UNKNOWN_ORDER_ID in service.status.message
