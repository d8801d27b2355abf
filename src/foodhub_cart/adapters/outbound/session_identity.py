from __future__ import annotations

from dataclasses import dataclass

from foodhub_cart.core.domain.model.identity import Identity
from foodhub_cart.core.ports.outbound.identity import IdentityProvider


@dataclass
class SessionIdentityProvider(IdentityProvider):
    _current: Identity | None = None

    def current_user(self) -> Identity | None:
        return self._current

    def login(self, identity: Identity) -> None:
        self._current = identity

    def logout(self) -> None:
        self._current = None
