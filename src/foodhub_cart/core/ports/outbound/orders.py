from __future__ import annotations

from typing import Protocol, Sequence

from returns.result import Result

from foodhub_cart.core.domain.model.errors import SubmissionError
from foodhub_cart.core.domain.model.submission import OrderCreated, OrderLine


class OrderService(Protocol):
    """
    Remote order creation. Called at most once per user-triggered submit;
    implementations must not retry on their own.
    """

    async def create_order(
        self, lines: Sequence[OrderLine]
    ) -> Result[OrderCreated, SubmissionError]: ...
