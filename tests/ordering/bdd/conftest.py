"""Shared BDD fixtures and step definitions for cart and order scenarios."""

import json

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError
from pytest_bdd import given, parsers, then
from storefront.ordering.checkout import PlaceOrder
from storefront.ordering.order import Order


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


@pytest.fixture()
def products():
    """Product names to ids."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a registered shopper", target_fixture="shopper")
def registered_shopper(customer):
    return customer


@given(parsers.cfparse('a product "{name}" priced at {price:f}'))
def product_priced(create_product, products, name, price):
    products[name] = str(create_product(name=name, price=price).id)


@given("a placed order", target_fixture="order_id")
def placed_order(customer, create_product):
    product = create_product()
    return current_domain.process(
        PlaceOrder(
            user_id=str(customer.id),
            items=json.dumps([{"product_id": str(product.id), "quantity": 1}]),
            total_price=12.5,
        ),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the request fails as not found")
def fails_not_found(error):
    assert isinstance(error["exc"], ObjectNotFoundError)


@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(order_id, status):
    assert current_domain.repository_for(Order).get(order_id).status == status
