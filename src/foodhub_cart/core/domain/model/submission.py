from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from foodhub_cart.core.domain.model.cart import CartSnapshot
from foodhub_cart.core.domain.model.identity import Identity
from foodhub_cart.core.domain.model.menu import MenuItemId


class SubmissionState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    REJECTED = "rejected"


class StatusKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class OrderStatus:
    kind: StatusKind
    message: str

    @staticmethod
    def success(message: str) -> "OrderStatus":
        return OrderStatus(StatusKind.SUCCESS, message)

    @staticmethod
    def error(message: str) -> "OrderStatus":
        return OrderStatus(StatusKind.ERROR, message)


@dataclass(frozen=True)
class OrderLine:
    # no price: the order service prices the order itself
    menu_item_id: MenuItemId
    quantity: int


@dataclass(frozen=True)
class OrderCreated:
    order_id: str


@dataclass(frozen=True)
class SubmitAttempt:
    identity: Identity | None
    snapshot: CartSnapshot
