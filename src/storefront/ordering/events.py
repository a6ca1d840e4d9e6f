"""Domain events for the Order aggregate.

Carts and placed orders share one aggregate, so cart activity and order
fulfillment are both recorded here.
"""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Order")
class CartOpened:
    """A user's first cart interaction created an empty cart."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)


@storefront.event(part_of="Order")
class CartItemAdded:
    __version__ = 1

    order_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@storefront.event(part_of="Order")
class CartItemRemoved:
    __version__ = 1

    order_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.event(part_of="Order")
class OrderPlaced:
    """A user checked out and a new order entered the fulfillment pipeline."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    total_price = Float(required=True)
    item_count = Integer(required=True)
    address = String(max_length=500)
    order_date = DateTime(required=True)


@storefront.event(part_of="Order")
class OrderAddressChanged:
    __version__ = 1

    order_id = Identifier(required=True)
    address = String(required=True, max_length=500)


@storefront.event(part_of="Order")
class OrderStatusChanged:
    """An admin moved a placed order forward in its lifecycle."""

    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_at = DateTime(required=True)


@storefront.event(part_of="Order")
class OrderDetailsUpdated:
    __version__ = 1

    order_id = Identifier(required=True)
    tracking_number = String(max_length=100)
    admin_note = Text()
