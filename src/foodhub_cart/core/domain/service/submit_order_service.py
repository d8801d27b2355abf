from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

from returns.result import Failure, Result, Success

from foodhub_cart.core.domain.model.cart import Cart, CartSnapshot
from foodhub_cart.core.domain.model.errors import (
    CartError,
    NetworkError,
    SubmissionError,
    SubmissionInProgress,
    SubmissionTimeout,
)
from foodhub_cart.core.domain.model.submission import (
    OrderCreated,
    OrderLine,
    OrderStatus,
    SubmissionState,
    SubmitAttempt,
)
from foodhub_cart.core.domain.service.validation import validate_attempt
from foodhub_cart.core.ports.inbound.submit_order import (
    SubmissionView,
    SubmitOrderUseCase,
)
from foodhub_cart.core.ports.outbound.identity import IdentityProvider
from foodhub_cart.core.ports.outbound.orders import OrderService

logger = logging.getLogger(__name__)

ORDER_FAILED_MESSAGE = "Failed to place order. Please try again."
ORDER_TIMEOUT_MESSAGE = "Order request timed out. Please try again."
IN_PROGRESS_MESSAGE = "Submission already in progress."


@dataclass(frozen=True)
class SubmitOrderDeps:
    identity: IdentityProvider
    orders: OrderService
    timeout_seconds: float | None = 10.0


class SubmitOrderService(SubmitOrderUseCase):
    """
    Validate -> send -> reduce, once per call to ``submit``.

    One instance belongs to one cart. ``state`` and ``status`` describe the
    latest attempt; a submit that arrives while another is still waiting on
    the order service is turned away with ``SubmissionInProgress`` and leaves
    the in-flight attempt alone. A cancelled submit ends in ``REJECTED`` and
    the cancellation propagates to the caller.
    """

    def __init__(self, deps: SubmitOrderDeps, cart: Cart) -> None:
        self.deps = deps
        self.cart = cart
        self.state = SubmissionState.IDLE
        self.status: OrderStatus | None = None

    def view(self) -> SubmissionView:
        return SubmissionView(state=self.state, status=self.status)

    async def submit(self) -> Result[OrderCreated, CartError]:
        if self.state is SubmissionState.SUBMITTING:
            logger.warning("submit ignored: previous order still in flight")
            self.status = OrderStatus.error(IN_PROGRESS_MESSAGE)
            return Failure(SubmissionInProgress(IN_PROGRESS_MESSAGE))

        self._enter(SubmissionState.VALIDATING)
        attempt = SubmitAttempt(
            identity=self.deps.identity.current_user(),
            snapshot=self.cart.snapshot,
        )
        validated = validate_attempt(attempt)
        if isinstance(validated, Failure):
            return self._reject(validated.failure())

        self._enter(SubmissionState.SUBMITTING)
        lines = build_order_lines(attempt.snapshot)
        try:
            result = await self._create_order(lines)
        except asyncio.CancelledError:
            self._reject(NetworkError("order submission cancelled"))
            raise

        if isinstance(result, Success):
            return self._succeed(result.unwrap())
        return self._reject(result.failure())

    # ---- remote call -------------------------------------------------------

    async def _create_order(
        self, lines: Sequence[OrderLine]
    ) -> Result[OrderCreated, SubmissionError]:
        timeout = self.deps.timeout_seconds
        try:
            if timeout is None:
                return await self.deps.orders.create_order(lines)
            return await asyncio.wait_for(
                self.deps.orders.create_order(lines), timeout=timeout
            )
        except asyncio.TimeoutError:
            return Failure(SubmissionTimeout(f"no response within {timeout}s"))
        except Exception as exc:  # noqa: BLE001
            logger.exception("order service raised instead of returning a result")
            return Failure(NetworkError(f"unexpected order service error: {exc!r}"))

    # ---- reducers ----------------------------------------------------------

    def _succeed(self, created: OrderCreated) -> Result[OrderCreated, CartError]:
        self.cart.clear()
        self.status = OrderStatus.success(
            f"Order placed successfully! Order ID: {created.order_id}"
        )
        self._enter(SubmissionState.SUCCEEDED)
        logger.info("order placed: order_id=%s", created.order_id)
        return Success(created)

    def _reject(self, err: CartError) -> Result[OrderCreated, CartError]:
        self.status = status_for_error(err)
        self._enter(SubmissionState.REJECTED)
        if isinstance(err, SubmissionError):
            logger.warning("order submission failed: %s", err)
        else:
            logger.info("order submission rejected: %s", err)
        return Failure(err)

    def _enter(self, state: SubmissionState) -> None:
        logger.debug("submission state %s -> %s", self.state.value, state.value)
        self.state = state


# ---- pure helpers ----------------------------------------------------------


def build_order_lines(snapshot: CartSnapshot) -> Tuple[OrderLine, ...]:
    return tuple(
        OrderLine(menu_item_id=it.id, quantity=it.quantity) for it in snapshot.items
    )


def status_for_error(err: CartError) -> OrderStatus:
    if isinstance(err, SubmissionTimeout):
        return OrderStatus.error(ORDER_TIMEOUT_MESSAGE)
    if isinstance(err, SubmissionError):
        return OrderStatus.error(ORDER_FAILED_MESSAGE)
    return OrderStatus.error(err.message)
