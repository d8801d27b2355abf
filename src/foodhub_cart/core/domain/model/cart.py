from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Tuple

from foodhub_cart.core.domain.model.errors import InvalidLineItem
from foodhub_cart.core.domain.model.menu import MenuItem, MenuItemId
from foodhub_cart.core.domain.model.money import DEFAULT_CURRENCY, Money, fold_money


@dataclass(frozen=True)
class LineItem:
    id: MenuItemId
    name: str
    price: Money
    quantity: int = 1

    def __post_init__(self) -> None:
        if self.price.amount < 0:
            raise InvalidLineItem(f"price must be >= 0 for item {self.id}")
        if self.quantity < 1:
            raise InvalidLineItem(f"quantity must be >= 1 for item {self.id}")

    @staticmethod
    def from_menu_item(item: MenuItem | "LineItem") -> "LineItem":
        return LineItem(id=item.id, name=item.name, price=item.price, quantity=1)

    def line_total(self) -> Money:
        return self.price * self.quantity

    def with_quantity(self, quantity: int) -> "LineItem":
        return replace(self, quantity=quantity)


@dataclass(frozen=True)
class CartSnapshot:
    items: Tuple[LineItem, ...]
    subtotal: Money
    item_count: int

    @staticmethod
    def empty(currency: str = DEFAULT_CURRENCY) -> "CartSnapshot":
        return CartSnapshot(items=(), subtotal=Money.zero(currency), item_count=0)

    def is_empty(self) -> bool:
        return not self.items


CartListener = Callable[[CartSnapshot], None]


class Cart:
    """
    Line-item ledger for one ordering session.

    Entries are keyed by menu item id and keep insertion order. Quantities are
    always >= 1: anything that would drop an entry to zero removes it instead.
    Every operation publishes a fresh immutable ``CartSnapshot`` to subscribers,
    so consumers never hold a reference to the mutable entries.
    """

    def __init__(self, currency: str = DEFAULT_CURRENCY) -> None:
        self._currency = currency
        self._entries: Dict[MenuItemId, LineItem] = {}
        self._listeners: List[CartListener] = []
        self._snapshot = CartSnapshot.empty(currency)

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def snapshot(self) -> CartSnapshot:
        return self._snapshot

    # ---- ledger operations -------------------------------------------------

    def add(self, item: MenuItem | LineItem) -> CartSnapshot:
        """
        Raises ``InvalidLineItem`` for a negative price or a price in another
        currency; the ledger is left as it was.
        """
        if item.price.currency != self._currency:
            raise InvalidLineItem(
                f"item {item.id} is priced in {item.price.currency}, "
                f"cart uses {self._currency}"
            )
        existing = self._entries.get(item.id)
        if existing is None:
            line = LineItem.from_menu_item(item)
        else:
            line = existing.with_quantity(existing.quantity + 1)
        self._entries[item.id] = line
        return self._commit()

    def remove(self, item_id: MenuItemId) -> CartSnapshot:
        self._entries.pop(item_id, None)
        return self._commit()

    def set_quantity(self, item_id: MenuItemId, quantity: int) -> CartSnapshot:
        if quantity <= 0:
            return self.remove(item_id)
        existing = self._entries.get(item_id)
        if existing is not None:
            self._entries[item_id] = existing.with_quantity(quantity)
        return self._commit()

    def clear(self) -> CartSnapshot:
        self._entries.clear()
        return self._commit()

    # ---- aggregates --------------------------------------------------------

    def subtotal(self) -> Money:
        return fold_money(
            (it.line_total() for it in self._entries.values()),
            currency=self._currency,
        )

    def item_count(self) -> int:
        return sum(it.quantity for it in self._entries.values())

    def items(self) -> Tuple[LineItem, ...]:
        return tuple(self._entries.values())

    def get(self, item_id: MenuItemId) -> LineItem | None:
        return self._entries.get(item_id)

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    # ---- change notification -----------------------------------------------

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self) -> CartSnapshot:
        self._snapshot = CartSnapshot(
            items=self.items(),
            subtotal=self.subtotal(),
            item_count=self.item_count(),
        )
        for listener in list(self._listeners):
            listener(self._snapshot)
        return self._snapshot
