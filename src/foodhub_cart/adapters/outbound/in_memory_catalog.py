from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Sequence

from returns.result import Failure, Result, Success

from foodhub_cart.core.domain.model.errors import CartError, RestaurantNotFound
from foodhub_cart.core.domain.model.menu import Restaurant, RestaurantId
from foodhub_cart.core.ports.outbound.catalog import MenuCatalog


@dataclass
class InMemoryCatalog(MenuCatalog):
    restaurants: Dict[RestaurantId, Restaurant] = field(default_factory=dict)

    @staticmethod
    def of(*restaurants: Restaurant) -> "InMemoryCatalog":
        return InMemoryCatalog(restaurants={r.id: r for r in restaurants})

    async def list_restaurants(self) -> Result[Sequence[Restaurant], CartError]:
        return Success(tuple(self.restaurants.values()))

    async def get_restaurant(
        self, restaurant_id: RestaurantId
    ) -> Result[Restaurant, CartError]:
        restaurant = self.restaurants.get(restaurant_id)
        if restaurant is None:
            return Failure(
                RestaurantNotFound(
                    message="restaurant not found", restaurant_id=restaurant_id
                )
            )
        return Success(restaurant)
