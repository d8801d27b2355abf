from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from returns.result import Result

from foodhub_cart.core.domain.model.errors import CartError
from foodhub_cart.core.domain.model.submission import (
    OrderCreated,
    OrderStatus,
    SubmissionState,
)


@dataclass(frozen=True)
class SubmissionView:
    state: SubmissionState
    status: OrderStatus | None


class SubmitOrderUseCase(Protocol):
    async def submit(self) -> Result[OrderCreated, CartError]: ...

    def view(self) -> SubmissionView: ...
