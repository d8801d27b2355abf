from __future__ import annotations

from dataclasses import dataclass

from returns.result import Failure, Result, Success

from foodhub_cart.core.domain.model.cart import Cart, CartSnapshot
from foodhub_cart.core.domain.model.errors import (
    CartError,
    InvalidLineItem,
    MenuItemNotFound,
)
from foodhub_cart.core.domain.model.menu import MenuItem, MenuItemId, Restaurant
from foodhub_cart.core.ports.inbound.manage_cart import (
    AddItemCommand,
    ManageCartUseCase,
    SetQuantityCommand,
)
from foodhub_cart.core.ports.outbound.catalog import MenuCatalog


@dataclass(frozen=True)
class ManageCartDeps:
    cart: Cart
    catalog: MenuCatalog


@dataclass(frozen=True)
class ManageCartService(ManageCartUseCase):
    deps: ManageCartDeps

    def view(self) -> CartSnapshot:
        return self.deps.cart.snapshot

    async def add_item(
        self, command: AddItemCommand
    ) -> Result[CartSnapshot, CartError]:
        found = await self.deps.catalog.get_restaurant(command.restaurant_id)
        return found.bind(lambda r: _find_menu_item(r, command.menu_item_id)).bind(
            self._add_to_cart
        )

    def _add_to_cart(self, item: MenuItem) -> Result[CartSnapshot, CartError]:
        try:
            return Success(self.deps.cart.add(item))
        except InvalidLineItem as err:
            return Failure(err)

    def remove_item(self, menu_item_id: MenuItemId) -> CartSnapshot:
        return self.deps.cart.remove(menu_item_id)

    def set_quantity(self, command: SetQuantityCommand) -> CartSnapshot:
        return self.deps.cart.set_quantity(command.menu_item_id, command.quantity)


def _find_menu_item(
    restaurant: Restaurant, menu_item_id: MenuItemId
) -> Result[MenuItem, CartError]:
    item = restaurant.find_item(menu_item_id)
    if item is None:
        return Failure(
            MenuItemNotFound(
                message=f"not on the menu of restaurant {restaurant.id}",
                menu_item_id=menu_item_id,
            )
        )
    return Success(item)
