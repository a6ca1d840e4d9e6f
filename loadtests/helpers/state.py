"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state — no cross-user sharing.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """Tracks state for a single simulated shopper session."""

    user_id: str | None = None
    email: str | None = None
    password: str | None = None
    address: str | None = None
    product_ids: list[str] = field(default_factory=list)
    cart_items: dict[str, int] = field(default_factory=dict)
    order_ids: list[str] = field(default_factory=list)


@dataclass
class AdminState:
    """Tracks the admin session and the orders it is working through."""

    token: str | None = None
    category_ids: list[str] = field(default_factory=list)
    open_order_ids: list[str] = field(default_factory=list)
