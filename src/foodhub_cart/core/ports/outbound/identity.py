from __future__ import annotations

from typing import Protocol

from foodhub_cart.core.domain.model.identity import Identity


class IdentityProvider(Protocol):
    def current_user(self) -> Identity | None:
        """Currently authenticated user, or None. Must not have side effects."""
        ...
