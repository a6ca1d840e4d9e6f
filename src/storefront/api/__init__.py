"""Storefront HTTP API package."""

from storefront.api.accounts import router as account_router
from storefront.api.admin import admin_router
from storefront.api.catalog import product_router
from storefront.api.errors import register_exception_handlers
from storefront.api.orders import cart_router, order_router

__all__ = [
    "account_router",
    "admin_router",
    "cart_router",
    "order_router",
    "product_router",
    "register_exception_handlers",
]
