"""Order aggregate — an open cart or a placed order, with its line items.

A user's cart is an Order flagged ``is_cart``. Checkout creates a separate,
placed Order from the submitted items; carts never enter the status pipeline.

State Machine (placed orders only):
    STARTED → PROCESSING → COMPLETED
    STARTED → COMPLETED
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Boolean, DateTime, Float, HasMany, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.ordering.events import (
    CartItemAdded,
    CartItemRemoved,
    CartOpened,
    OrderAddressChanged,
    OrderDetailsUpdated,
    OrderPlaced,
    OrderStatusChanged,
)

DEFAULT_ADDRESS = "no-address"


class OrderStatus(Enum):
    STARTED = "started"
    PROCESSING = "processing"
    COMPLETED = "completed"


# State machine transition map
_VALID_TRANSITIONS = {
    OrderStatus.STARTED: {OrderStatus.PROCESSING, OrderStatus.COMPLETED},
    OrderStatus.PROCESSING: {OrderStatus.COMPLETED},
    OrderStatus.COMPLETED: set(),  # Terminal
}


@storefront.entity(part_of="Order", limit=-1)
class OrderItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1, default=1)
    added_at = DateTime()


@storefront.aggregate(limit=-1)
class Order:
    user_id = Identifier(required=True)
    items = HasMany(OrderItem)
    total_price = Float(min_value=0.0, default=0.0)
    is_cart = Boolean(default=True)
    status = String(choices=OrderStatus, default=OrderStatus.STARTED.value)
    tracking_number = String(max_length=100)
    admin_note = Text()
    order_date = DateTime()
    address = String(max_length=500)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------
    @classmethod
    def open_cart(cls, user_id):
        now = datetime.now(UTC)
        cart = cls(
            user_id=user_id,
            is_cart=True,
            status=OrderStatus.STARTED.value,
            created_at=now,
            updated_at=now,
        )
        cart.raise_(CartOpened(order_id=str(cart.id), user_id=str(user_id)))
        return cart

    @classmethod
    def place(cls, user_id, items, total_price, address=None):
        """Create a placed order from ``items`` (dicts with product_id and quantity)."""
        if not items:
            raise ValidationError({"items": ["An order needs at least one item"]})

        now = datetime.now(UTC)
        order = cls(
            user_id=user_id,
            is_cart=False,
            total_price=total_price,
            status=OrderStatus.STARTED.value,
            address=address or DEFAULT_ADDRESS,
            order_date=now,
            created_at=now,
            updated_at=now,
        )
        for item in items:
            order.add_items(
                OrderItem(
                    product_id=item["product_id"],
                    quantity=item.get("quantity", 1),
                    added_at=now,
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                total_price=order.total_price,
                item_count=len(order.items),
                address=order.address,
                order_date=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Cart items
    # -------------------------------------------------------------------
    def find_item(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def add_item(self, product_id, quantity=1):
        """Add a product to the cart, or increase its quantity if already present."""
        if not self.is_cart:
            raise ValidationError({"order": ["Items can only be added to a cart"]})

        now = datetime.now(UTC)
        existing = self.find_item(product_id)
        if existing:
            existing.quantity += quantity
            new_quantity = existing.quantity
        else:
            self.add_items(OrderItem(product_id=product_id, quantity=quantity, added_at=now))
            new_quantity = quantity

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                order_id=str(self.id),
                product_id=str(product_id),
                quantity=quantity,
                new_quantity=new_quantity,
            )
        )

    def remove_item(self, product_id):
        if not self.is_cart:
            raise ValidationError({"order": ["Items can only be removed from a cart"]})

        item = self.find_item(product_id)
        if item is None:
            raise ObjectNotFoundError({"product_id": [f"Product {product_id} is not in the cart"]})

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(CartItemRemoved(order_id=str(self.id), product_id=str(product_id)))

    # -------------------------------------------------------------------
    # Placed order management
    # -------------------------------------------------------------------
    def change_address(self, address):
        if not address:
            raise ValidationError({"address": ["Address is required"]})

        self.address = address
        self.updated_at = datetime.now(UTC)
        self.raise_(OrderAddressChanged(order_id=str(self.id), address=address))

    def _assert_can_transition(self, target_status):
        """Validate that the current state allows transition to target."""
        current = OrderStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    def update_status(self, new_status):
        if self.is_cart:
            raise ValidationError({"status": ["A cart has no fulfillment status"]})

        try:
            target = OrderStatus(new_status)
        except ValueError:
            raise ValidationError({"status": [f"Unknown order status: {new_status}"]}) from None

        self._assert_can_transition(target)

        previous_status = self.status
        self.status = target.value
        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=previous_status,
                new_status=target.value,
                changed_at=now,
            )
        )

    def annotate(self, tracking_number=None, admin_note=None):
        """Record shipment tracking and an internal admin note."""
        self.tracking_number = tracking_number
        self.admin_note = admin_note
        self.updated_at = datetime.now(UTC)

        self.raise_(
            OrderDetailsUpdated(
                order_id=str(self.id),
                tracking_number=tracking_number,
                admin_note=admin_note,
            )
        )
