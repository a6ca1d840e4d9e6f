"""Assemble response payloads from aggregates, joining related records."""

from protean.utils.globals import current_domain

from storefront.account.user import User
from storefront.api.schemas import (
    AdminOrderResponse,
    CategoryResponse,
    OrderItemResponse,
    OrderResponse,
    ProductResponse,
    UserProfileResponse,
    UserResponse,
)
from storefront.catalog.product import Product
from storefront.ordering.order import Order


def category_view(category) -> CategoryResponse:
    return CategoryResponse(id=str(category.id), name=category.name, created_at=category.created_at)


def product_view(product) -> ProductResponse:
    return ProductResponse(
        id=str(product.id),
        name=product.name,
        price=product.price or 0.0,
        description=product.description,
        stock=product.stock or 0,
        image_url=product.image_url,
        category_id=str(product.category_id) if product.category_id else None,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


def user_view(user) -> UserResponse:
    return UserResponse(
        id=str(user.id),
        email=user.email,
        name=user.name,
        phone=user.phone,
        address=user.address,
        role=user.role,
        registered_at=user.registered_at,
    )


def _products_for(orders) -> dict:
    product_ids = [item.product_id for order in orders for item in order.items]
    return current_domain.repository_for(Product).get_many(product_ids)


def item_views(order, products) -> list[OrderItemResponse]:
    """Line items with their product joined; deleted products come back as None."""
    views = []
    for item in order.items:
        product = products.get(str(item.product_id))
        views.append(
            OrderItemResponse(
                id=str(item.id),
                product_id=str(item.product_id),
                quantity=item.quantity,
                added_at=item.added_at,
                product=product_view(product) if product else None,
            )
        )
    return views


def _order_fields(order, products) -> dict:
    return {
        "id": str(order.id),
        "user_id": str(order.user_id),
        "total_price": order.total_price or 0.0,
        "is_cart": bool(order.is_cart),
        "status": order.status,
        "tracking_number": order.tracking_number,
        "admin_note": order.admin_note,
        "order_date": order.order_date,
        "address": order.address,
        "created_at": order.created_at,
        "updated_at": order.updated_at,
        "items": item_views(order, products),
    }


def order_view(order, products=None) -> OrderResponse:
    if products is None:
        products = _products_for([order])
    return OrderResponse(**_order_fields(order, products))


def admin_order_views(orders) -> list[AdminOrderResponse]:
    """Placed orders with their owner and products joined, loaded in batches."""
    products = _products_for(orders)
    users = current_domain.repository_for(User).get_many(order.user_id for order in orders)

    return [
        AdminOrderResponse(
            **_order_fields(order, products),
            user=user_view(users[str(order.user_id)]) if str(order.user_id) in users else None,
        )
        for order in orders
    ]


def profile_view(user) -> UserProfileResponse:
    """The user with placed orders and open cart, each with products joined."""
    repo = current_domain.repository_for(Order)
    orders = repo.placed_for(user.id)
    cart = repo.find_cart_for(user.id)

    products = _products_for(orders + ([cart] if cart else []))
    return UserProfileResponse(
        **user_view(user).model_dump(),
        orders=[order_view(order, products) for order in orders],
        cart=order_view(cart, products) if cart else None,
    )
