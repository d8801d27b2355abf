from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from returns.result import Result

from foodhub_cart.core.domain.model.cart import CartSnapshot
from foodhub_cart.core.domain.model.errors import CartError
from foodhub_cart.core.domain.model.menu import MenuItemId, RestaurantId


@dataclass(frozen=True)
class AddItemCommand:
    restaurant_id: RestaurantId
    menu_item_id: MenuItemId


@dataclass(frozen=True)
class SetQuantityCommand:
    menu_item_id: MenuItemId
    quantity: int  # <= 0 removes the entry


class ManageCartUseCase(Protocol):
    def view(self) -> CartSnapshot: ...

    async def add_item(
        self, command: AddItemCommand
    ) -> Result[CartSnapshot, CartError]: ...

    def remove_item(self, menu_item_id: MenuItemId) -> CartSnapshot: ...

    def set_quantity(self, command: SetQuantityCommand) -> CartSnapshot: ...
