import os
from pathlib import Path

import pytest

# Registering this address gives the admin role
ADMIN_EMAIL = "admin@storefront.test"
os.environ["ADMIN_EMAIL"] = ADMIN_EMAIL


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Fetch and activate the domain by pushing the associated domain_context. The activated domain can then be referred to elsewhere as `current_domain`
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env

    from storefront import api  # noqa: F401  (load the api package before domain traversal imports its submodules)
    from storefront.domain import storefront

    storefront.init()
    storefront.domain_context().push()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        # Mark tests based on their directory
        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session", autouse=True)
def setup_db(request):
    from storefront.domain import storefront
    from storefront.utils.db import drop_db, setup_db

    setup_db(storefront)

    yield

    drop_db(storefront)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Fixture to automatically cleanup infrastructure after every test"""
    yield

    from protean import current_domain

    # Clear all databases
    for _, provider in current_domain.providers.items():
        provider._data_reset()

    # Drain event stores
    current_domain.event_store.store._data_reset()


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def client():
    """TestClient over every storefront router, without the app's middleware."""
    from fastapi import FastAPI
    from fastapi.testclient import TestClient
    from storefront.api import (
        account_router,
        admin_router,
        cart_router,
        order_router,
        product_router,
        register_exception_handlers,
    )

    app = FastAPI()
    app.include_router(account_router)
    app.include_router(product_router)
    app.include_router(cart_router)
    app.include_router(order_router)
    app.include_router(admin_router)
    register_exception_handlers(app)
    return TestClient(app)


@pytest.fixture()
def register_user():
    """Register a user through the domain and return the persisted aggregate."""
    from protean import current_domain
    from storefront.account.registration import RegisterUser
    from storefront.account.user import User

    def _register(email="jane@example.com", password="s3cret-pass", **profile):
        user_id = current_domain.process(
            RegisterUser(email=email, password=password, **profile),
            asynchronous=False,
        )
        return current_domain.repository_for(User).get(user_id)

    return _register


@pytest.fixture()
def admin(register_user):
    return register_user(email=ADMIN_EMAIL, password="admin-pass", name="Store Admin")


@pytest.fixture()
def admin_headers(admin):
    from storefront.account.authentication import create_token

    return {"Authorization": f"Bearer {create_token(admin)}"}


@pytest.fixture()
def customer(register_user):
    return register_user(
        email="jane@example.com",
        password="s3cret-pass",
        name="Jane Doe",
        phone="+1-555-0100",
        address="1 Main St, Springfield",
    )


@pytest.fixture()
def customer_headers(customer):
    from storefront.account.authentication import create_token

    return {"Authorization": f"Bearer {create_token(customer)}"}


@pytest.fixture()
def create_product():
    """Create a product through the domain and return the persisted aggregate."""
    from protean import current_domain
    from storefront.catalog.creation import CreateProduct
    from storefront.catalog.product import Product

    def _create(name="Espresso Cup", price=12.5, stock=10, **fields):
        product_id = current_domain.process(
            CreateProduct(name=name, price=price, stock=stock, **fields),
            asynchronous=False,
        )
        return current_domain.repository_for(Product).get(product_id)

    return _create
