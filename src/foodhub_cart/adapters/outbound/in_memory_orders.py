from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from returns.result import Failure, Result, Success

from foodhub_cart.core.domain.model.errors import SubmissionError
from foodhub_cart.core.domain.model.submission import OrderCreated, OrderLine
from foodhub_cart.core.ports.outbound.orders import OrderService


@dataclass
class InMemoryOrderService(OrderService):
    """
    Stand-in for the remote order service.

    ``fail_with`` makes every call fail with that error. ``gate``, when set,
    holds each call until the event fires, which lets callers observe the
    submitting state.
    """

    fail_with: SubmissionError | None = None
    gate: asyncio.Event | None = None
    calls: List[Tuple[OrderLine, ...]] = field(default_factory=list)
    _next_id: int = 1

    async def create_order(
        self, lines: Sequence[OrderLine]
    ) -> Result[OrderCreated, SubmissionError]:
        self.calls.append(tuple(lines))
        if self.gate is not None:
            await self.gate.wait()
        if self.fail_with is not None:
            return Failure(self.fail_with)

        order_id = str(self._next_id)
        self._next_id += 1
        return Success(OrderCreated(order_id=order_id))
