import json

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from storefront.ordering.checkout import PlaceOrder
from storefront.ordering.delivery import UpdateOrderAddress
from storefront.ordering.fulfillment import UpdateOrderDetails, UpdateOrderStatus
from storefront.ordering.order import Order
from storefront.ordering.removal import DeleteOrder


@pytest.fixture()
def order(customer, create_product):
    product = create_product()
    order_id = current_domain.process(
        PlaceOrder(
            user_id=str(customer.id),
            items=json.dumps([{"product_id": str(product.id), "quantity": 1}]),
            total_price=12.5,
        ),
        asynchronous=False,
    )
    return current_domain.repository_for(Order).get(order_id)


class TestUpdateOrderAddress:
    def test_sets_address(self, order):
        current_domain.process(UpdateOrderAddress(order_id=str(order.id), address="2 Side St"), asynchronous=False)
        assert current_domain.repository_for(Order).get(order.id).address == "2 Side St"

    def test_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(UpdateOrderAddress(order_id="missing", address="x"), asynchronous=False)


class TestUpdateOrderStatus:
    def test_transition_is_persisted(self, order):
        current_domain.process(UpdateOrderStatus(order_id=str(order.id), status="processing"), asynchronous=False)
        assert current_domain.repository_for(Order).get(order.id).status == "processing"

    def test_invalid_transition_is_not_persisted(self, order):
        current_domain.process(UpdateOrderStatus(order_id=str(order.id), status="completed"), asynchronous=False)

        with pytest.raises(ValidationError):
            current_domain.process(UpdateOrderStatus(order_id=str(order.id), status="processing"), asynchronous=False)

        assert current_domain.repository_for(Order).get(order.id).status == "completed"

    def test_unknown_order_writes_nothing(self, order):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(UpdateOrderStatus(order_id="missing", status="processing"), asynchronous=False)

        assert current_domain.repository_for(Order)._dao.query.all().total == 1
        assert current_domain.repository_for(Order).get(order.id).status == "started"


class TestUpdateOrderDetails:
    def test_sets_both_fields(self, order):
        result = current_domain.process(
            UpdateOrderDetails(order_id=str(order.id), tracking_number="TRK-1", admin_note="Leave at door"),
            asynchronous=False,
        )

        assert result == str(order.id)
        updated = current_domain.repository_for(Order).get(order.id)
        assert updated.tracking_number == "TRK-1"
        assert updated.admin_note == "Leave at door"

    def test_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(UpdateOrderDetails(order_id="missing", tracking_number="x"), asynchronous=False)


class TestDeleteOrder:
    def test_delete(self, order):
        current_domain.process(DeleteOrder(order_id=str(order.id)), asynchronous=False)

        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Order).get(order.id)

    def test_deleting_twice_succeeds(self, order):
        current_domain.process(DeleteOrder(order_id=str(order.id)), asynchronous=False)
        current_domain.process(DeleteOrder(order_id=str(order.id)), asynchronous=False)

    def test_deleting_unknown_order_succeeds(self):
        current_domain.process(DeleteOrder(order_id="missing"), asynchronous=False)
