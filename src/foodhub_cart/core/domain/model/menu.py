from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple

from foodhub_cart.core.domain.model.money import Money

MenuItemId = int
RestaurantId = int


@dataclass(frozen=True)
class MenuItem:
    id: MenuItemId
    name: str
    price: Money
    description: str | None = None


@dataclass(frozen=True)
class Restaurant:
    id: RestaurantId
    name: str
    cuisine: str = ""
    location: str = ""
    rating: Decimal | None = None
    menu: Tuple[MenuItem, ...] = ()

    def find_item(self, item_id: MenuItemId) -> MenuItem | None:
        for item in self.menu:
            if item.id == item_id:
                return item
        return None
