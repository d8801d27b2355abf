from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---- detected locally, before any I/O ---------------------------------------


@dataclass(frozen=True)
class ValidationError(CartError):
    pass


@dataclass(frozen=True)
class NotAuthenticated(ValidationError):
    pass


@dataclass(frozen=True)
class EmptyCart(ValidationError):
    pass


@dataclass(frozen=True)
class InvalidLineItem(ValidationError):
    pass


@dataclass(frozen=True)
class SubmissionInProgress(CartError):
    pass


# ---- surfaced from the remote order service ---------------------------------


@dataclass(frozen=True)
class SubmissionError(CartError):
    pass


@dataclass(frozen=True)
class NetworkError(SubmissionError):
    pass


@dataclass(frozen=True)
class RejectedByServer(SubmissionError):
    status_code: int

    def __str__(self) -> str:  # pragma: no cover
        return f"rejected_by_server: status={self.status_code} ({self.message})"


@dataclass(frozen=True)
class SubmissionTimeout(SubmissionError):
    pass


# ---- menu catalog -----------------------------------------------------------


@dataclass(frozen=True)
class CatalogError(CartError):
    pass


@dataclass(frozen=True)
class RestaurantNotFound(CatalogError):
    restaurant_id: int

    def __str__(self) -> str:  # pragma: no cover
        return f"restaurant_not_found: {self.restaurant_id} ({self.message})"


@dataclass(frozen=True)
class MenuItemNotFound(CatalogError):
    menu_item_id: int

    def __str__(self) -> str:  # pragma: no cover
        return f"menu_item_not_found: {self.menu_item_id} ({self.message})"
