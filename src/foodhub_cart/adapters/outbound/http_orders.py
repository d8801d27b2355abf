from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

import httpx
from pydantic import BaseModel
from returns.result import Failure, Result, Success

from foodhub_cart.core.domain.model.errors import (
    NetworkError,
    RejectedByServer,
    SubmissionError,
    SubmissionTimeout,
)
from foodhub_cart.core.domain.model.identity import Identity
from foodhub_cart.core.domain.model.submission import OrderCreated, OrderLine
from foodhub_cart.core.ports.outbound.identity import IdentityProvider
from foodhub_cart.core.ports.outbound.orders import OrderService

logger = logging.getLogger(__name__)

ORDERS_PATH = "/api/orders"
UNKNOWN_ORDER_ID = "unknown"


class OrderCreatedIn(BaseModel):
    id: int | str


@dataclass
class HttpOrderService(OrderService):
    client: httpx.AsyncClient
    identity: IdentityProvider

    async def create_order(
        self, lines: Sequence[OrderLine]
    ) -> Result[OrderCreated, SubmissionError]:
        body = {"items": [to_wire_line(ln) for ln in lines]}
        headers = _auth_headers(self.identity.current_user())

        try:
            response = await self.client.post(ORDERS_PATH, json=body, headers=headers)
        except httpx.TimeoutException as exc:
            return Failure(SubmissionTimeout(f"order request timed out: {exc!r}"))
        except httpx.HTTPError as exc:
            return Failure(NetworkError(f"order request failed: {exc!r}"))

        if not response.is_success:
            logger.debug("order service answered %s: %s", response.status_code, response.text)
            return Failure(
                RejectedByServer(
                    message="order service rejected the order",
                    status_code=response.status_code,
                )
            )

        # any 2xx means the order was created, readable body or not
        try:
            created = OrderCreatedIn.model_validate(response.json())
        except ValueError as exc:
            # json decode errors and pydantic validation errors are both ValueErrors
            logger.warning("order created but response body unreadable: %s", exc)
            return Success(OrderCreated(order_id=UNKNOWN_ORDER_ID))

        return Success(OrderCreated(order_id=str(created.id)))


def to_wire_line(line: OrderLine) -> dict[str, Any]:
    return {"menuItemId": line.menu_item_id, "quantity": line.quantity}


def _auth_headers(identity: Identity | None) -> dict[str, str]:
    if identity is None or not identity.token:
        return {}
    return {"Authorization": f"Bearer {identity.token}"}
