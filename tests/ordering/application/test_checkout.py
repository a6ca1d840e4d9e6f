import json

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from storefront.ordering.cart import AddToCart, process_cart_command
from storefront.ordering.checkout import PlaceOrder
from storefront.ordering.order import Order


def _place(user_id, items, total_price=40.0, address=None):
    return current_domain.process(
        PlaceOrder(user_id=user_id, items=json.dumps(items), total_price=total_price, address=address),
        asynchronous=False,
    )


class TestPlaceOrderHandler:
    def test_creates_exactly_one_new_order(self, customer, create_product):
        product = create_product(price=20.0)

        order_id = _place(str(customer.id), [{"product_id": str(product.id), "quantity": 2}], 40.0, "1 Main St")

        orders = current_domain.repository_for(Order).placed_for(customer.id)
        assert [str(order.id) for order in orders] == [order_id]

        order = orders[0]
        assert order.is_cart is False
        assert order.total_price == 40.0
        assert order.status == "started"
        assert order.address == "1 Main St"
        assert order.order_date is not None
        assert [(item.product_id, item.quantity) for item in order.items] == [(str(product.id), 2)]

    def test_existing_cart_is_left_untouched(self, customer, create_product):
        product = create_product()
        cart_id = process_cart_command(AddToCart(user_id=str(customer.id), product_id=str(product.id), quantity=3))

        order_id = _place(str(customer.id), [{"product_id": str(product.id), "quantity": 1}])

        assert order_id != cart_id
        cart = current_domain.repository_for(Order).get(cart_id)
        assert cart.is_cart is True
        assert cart.items[0].quantity == 3

    def test_address_falls_back(self, customer, create_product):
        product = create_product()
        order_id = _place(str(customer.id), [{"product_id": str(product.id), "quantity": 1}])
        assert current_domain.repository_for(Order).get(order_id).address == "no-address"

    def test_total_is_not_recomputed(self, customer, create_product):
        product = create_product(price=100.0)
        order_id = _place(str(customer.id), [{"product_id": str(product.id), "quantity": 3}], total_price=1.0)
        assert current_domain.repository_for(Order).get(order_id).total_price == 1.0

    def test_unknown_user(self, create_product):
        product = create_product()
        with pytest.raises(ObjectNotFoundError):
            _place("missing", [{"product_id": str(product.id), "quantity": 1}])

    def test_unknown_product(self, customer):
        with pytest.raises(ObjectNotFoundError) as exc:
            _place(str(customer.id), [{"product_id": "missing", "quantity": 1}])
        assert "product_id" in exc.value.messages
        assert current_domain.repository_for(Order).placed_for(customer.id) == []

    def test_empty_order(self, customer):
        with pytest.raises(ValidationError):
            _place(str(customer.id), [])
