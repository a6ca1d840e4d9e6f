"""BDD tests for browsing and maintaining the catalog."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, scenarios, then, when
from storefront.catalog.creation import CreateProduct
from storefront.catalog.details import UpdateProduct
from storefront.catalog.management import CreateCategory
from storefront.catalog.product import Product

scenarios("features/product_catalog.feature")


@pytest.fixture()
def catalog():
    """Names to ids for the categories and products created by the scenario."""
    return {"categories": {}, "products": {}}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a category "{name}"'))
def category(catalog, name):
    catalog["categories"][name] = current_domain.process(CreateCategory(name=name), asynchronous=False)


@given(parsers.cfparse('a product "{name}" in category "{category}"'))
def product_in_category(catalog, name, category):
    catalog["products"][name] = current_domain.process(
        CreateProduct(name=name, price=5.0, category_id=catalog["categories"][category]),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('shoppers search for "{term}" in category "{category}"'), target_fixture="results")
def search_in_category(catalog, term, category):
    return current_domain.repository_for(Product).search(search=term, category_id=catalog["categories"][category])


@when(parsers.cfparse('shoppers search the whole catalog for "{term}"'), target_fixture="results")
def search(term):
    return current_domain.repository_for(Product).search(search=term)


@when(parsers.cfparse('shoppers browse category "{category}"'), target_fixture="results")
def browse(catalog, category):
    return current_domain.repository_for(Product).search(category_id=catalog["categories"][category])


@when(parsers.cfparse('the price of "{name}" is changed to {price:f}'))
def change_price(catalog, name, price):
    current_domain.process(UpdateProduct(product_id=catalog["products"][name], price=price), asynchronous=False)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('they see "{names}"'))
def they_see(results, names):
    assert sorted(product.name for product in results) == [name.strip() for name in names.split(",")]


@then(parsers.cfparse('"{name}" costs {price:f}'))
def product_costs(catalog, name, price):
    assert current_domain.repository_for(Product).get(catalog["products"][name]).price == price


@then(parsers.cfparse('"{name}" is still in category "{category}"'))
def product_in_category_still(catalog, name, category):
    product = current_domain.repository_for(Product).get(catalog["products"][name])
    assert product.category_id == catalog["categories"][category]
