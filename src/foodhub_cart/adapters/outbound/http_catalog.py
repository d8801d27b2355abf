from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

import httpx
from pydantic import BaseModel, ConfigDict, Field
from returns.result import Failure, Result, Success

from foodhub_cart.core.domain.model.errors import (
    CartError,
    CatalogError,
    RestaurantNotFound,
)
from foodhub_cart.core.domain.model.menu import MenuItem, Restaurant, RestaurantId
from foodhub_cart.core.domain.model.money import DEFAULT_CURRENCY, Money
from foodhub_cart.core.ports.outbound.catalog import MenuCatalog

RESTAURANTS_PATH = "/api/restaurants"


# ---- wire DTOs ---------------------------------------------------------------


class MenuItemIn(BaseModel):
    id: int
    name: str
    price: Decimal = Field(ge=0)
    description: str | None = None


class RestaurantIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    cuisine: str = ""
    location: str = ""
    rating: Decimal | None = None
    menu_items: list[MenuItemIn] = Field(default_factory=list, alias="MenuItems")


# ---- adapter -----------------------------------------------------------------


@dataclass
class HttpMenuCatalog(MenuCatalog):
    client: httpx.AsyncClient
    currency: str = DEFAULT_CURRENCY

    async def list_restaurants(self) -> Result[Sequence[Restaurant], CartError]:
        fetched = await self._get_json(RESTAURANTS_PATH)
        return fetched.bind(self._parse_many)

    async def get_restaurant(
        self, restaurant_id: RestaurantId
    ) -> Result[Restaurant, CartError]:
        fetched = await self._get_json(
            f"{RESTAURANTS_PATH}/{restaurant_id}", restaurant_id=restaurant_id
        )
        return fetched.bind(self._parse_one)

    async def _get_json(
        self, path: str, restaurant_id: RestaurantId | None = None
    ) -> Result[object, CartError]:
        try:
            response = await self.client.get(path)
        except httpx.HTTPError as exc:
            return Failure(CatalogError(f"catalog request failed: {exc!r}"))

        if response.status_code == 404 and restaurant_id is not None:
            return Failure(
                RestaurantNotFound(
                    message="restaurant not found", restaurant_id=restaurant_id
                )
            )
        if not response.is_success:
            return Failure(
                CatalogError(f"catalog answered {response.status_code} for {path}")
            )
        try:
            return Success(response.json())
        except ValueError as exc:
            return Failure(CatalogError(f"unreadable catalog response: {exc}"))

    def _parse_one(self, payload: object) -> Result[Restaurant, CartError]:
        try:
            dto = RestaurantIn.model_validate(payload)
        except ValueError as exc:
            return Failure(CatalogError(f"malformed restaurant: {exc}"))
        return Success(self._to_domain(dto))

    def _parse_many(self, payload: object) -> Result[Sequence[Restaurant], CartError]:
        if not isinstance(payload, list):
            return Failure(CatalogError("restaurant list must be a JSON array"))
        try:
            dtos = [RestaurantIn.model_validate(x) for x in payload]
        except ValueError as exc:
            return Failure(CatalogError(f"malformed restaurant: {exc}"))
        return Success(tuple(self._to_domain(d) for d in dtos))

    def _to_domain(self, dto: RestaurantIn) -> Restaurant:
        return Restaurant(
            id=dto.id,
            name=dto.name,
            cuisine=dto.cuisine,
            location=dto.location,
            rating=dto.rating,
            menu=tuple(
                MenuItem(
                    id=mi.id,
                    name=mi.name,
                    price=Money.of(mi.price, currency=self.currency),
                    description=mi.description,
                )
                for mi in dto.menu_items
            ),
        )
