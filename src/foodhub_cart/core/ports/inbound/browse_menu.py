from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from returns.result import Result

from foodhub_cart.core.domain.model.errors import CartError
from foodhub_cart.core.domain.model.menu import Restaurant


@dataclass(frozen=True)
class GetRestaurantQuery:
    restaurant_id: int


class BrowseMenuUseCase(Protocol):
    async def list_restaurants(self) -> Result[Sequence[Restaurant], CartError]: ...

    async def get_restaurant(
        self, query: GetRestaurantQuery
    ) -> Result[Restaurant, CartError]: ...
