"""Checkout — turns submitted line items into a placed order."""

import json

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.account.user import User
from storefront.catalog.product import Product
from storefront.domain import logger, storefront
from storefront.ordering.order import Order


@storefront.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    items = Text(required=True)  # JSON: list of {"product_id", "quantity"}
    total_price = Float(min_value=0.0, default=0.0)
    address = String(max_length=500)


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        items_data = json.loads(command.items) if isinstance(command.items, str) else command.items

        current_domain.repository_for(User).get(command.user_id)

        product_ids = [str(item["product_id"]) for item in items_data]
        products = current_domain.repository_for(Product).get_many(product_ids)
        missing = sorted(set(product_ids) - set(products))
        if missing:
            raise ObjectNotFoundError({"product_id": [f"Product {product_id} does not exist" for product_id in missing]})

        # The submitted total is trusted as-is
        order = Order.place(
            user_id=command.user_id,
            items=items_data,
            total_price=command.total_price or 0.0,
            address=command.address,
        )
        current_domain.repository_for(Order).add(order)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            user_id=str(command.user_id),
            total_price=order.total_price,
            item_count=len(order.items),
        )
        return str(order.id)
