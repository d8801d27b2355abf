from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from returns.result import Failure, Result

from foodhub_cart.core.domain.model.errors import CartError, ValidationError
from foodhub_cart.core.domain.model.menu import Restaurant
from foodhub_cart.core.ports.inbound.browse_menu import (
    BrowseMenuUseCase,
    GetRestaurantQuery,
)
from foodhub_cart.core.ports.outbound.catalog import MenuCatalog


@dataclass(frozen=True)
class BrowseMenuDeps:
    catalog: MenuCatalog


@dataclass(frozen=True)
class BrowseMenuService(BrowseMenuUseCase):
    deps: BrowseMenuDeps

    async def list_restaurants(self) -> Result[Sequence[Restaurant], CartError]:
        return await self.deps.catalog.list_restaurants()

    async def get_restaurant(
        self, query: GetRestaurantQuery
    ) -> Result[Restaurant, CartError]:
        if query.restaurant_id <= 0:
            return Failure(ValidationError(message="restaurant_id must be > 0"))
        return await self.deps.catalog.get_restaurant(query.restaurant_id)
