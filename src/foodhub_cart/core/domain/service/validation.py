from __future__ import annotations

from returns.pipeline import flow
from returns.pointfree import bind
from returns.result import Failure, Result, Success

from foodhub_cart.core.domain.model.errors import CartError, EmptyCart, NotAuthenticated
from foodhub_cart.core.domain.model.submission import SubmitAttempt

LOGIN_REQUIRED_MESSAGE = "Please login to place an order"
EMPTY_CART_MESSAGE = "Your cart is empty"


def validate_identity(attempt: SubmitAttempt) -> Result[SubmitAttempt, CartError]:
    if attempt.identity is None:
        return Failure(NotAuthenticated(LOGIN_REQUIRED_MESSAGE))
    return Success(attempt)


def validate_cart(attempt: SubmitAttempt) -> Result[SubmitAttempt, CartError]:
    if attempt.snapshot.is_empty():
        return Failure(EmptyCart(EMPTY_CART_MESSAGE))
    return Success(attempt)


def validate_attempt(attempt: SubmitAttempt) -> Result[SubmitAttempt, CartError]:
    # order matters: an anonymous user with an empty cart is told to log in
    return flow(
        attempt,
        validate_identity,
        bind(validate_cart),
    )
