from __future__ import annotations

from typing import Protocol, Sequence

from returns.result import Result

from foodhub_cart.core.domain.model.errors import CartError
from foodhub_cart.core.domain.model.menu import Restaurant, RestaurantId


class MenuCatalog(Protocol):
    async def list_restaurants(self) -> Result[Sequence[Restaurant], CartError]: ...

    async def get_restaurant(
        self, restaurant_id: RestaurantId
    ) -> Result[Restaurant, CartError]: ...
