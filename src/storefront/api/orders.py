"""FastAPI endpoints for the shopping cart and checkout."""

import json

from fastapi import APIRouter
from protean.utils.globals import current_domain

from storefront.api.schemas import (
    AddToCartRequest,
    CheckoutRequest,
    OrderItemResponse,
    OrderResponse,
    RemoveFromCartRequest,
    StatusResponse,
    UpdateOrderAddressRequest,
)
from storefront.api.views import item_views, order_view
from storefront.catalog.product import Product
from storefront.ordering.cart import AddToCart, RemoveFromCart, process_cart_command
from storefront.ordering.checkout import PlaceOrder
from storefront.ordering.delivery import UpdateOrderAddress
from storefront.ordering.order import Order

# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.post("/add", response_model=list[OrderItemResponse])
async def add_to_cart(body: AddToCartRequest) -> list[OrderItemResponse]:
    command = AddToCart(
        user_id=body.user_id,
        product_id=body.product_id,
        quantity=body.quantity,
    )
    cart_id = process_cart_command(command)

    cart = current_domain.repository_for(Order).get(cart_id)
    products = current_domain.repository_for(Product).get_many(item.product_id for item in cart.items)
    return item_views(cart, products)


@cart_router.post("/remove", response_model=StatusResponse)
async def remove_from_cart(body: RemoveFromCartRequest) -> StatusResponse:
    command = RemoveFromCart(user_id=body.user_id, product_id=body.product_id)
    process_cart_command(command)
    return StatusResponse(message="Item removed from cart")


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderResponse)
async def checkout(body: CheckoutRequest) -> OrderResponse:
    command = PlaceOrder(
        user_id=body.owner_id,
        items=json.dumps([{"product_id": item.product_id, "quantity": item.quantity} for item in body.items]),
        total_price=body.total_price,
        address=body.address,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return order_view(current_domain.repository_for(Order).get(order_id))


@order_router.put("", response_model=StatusResponse)
async def update_order_address(body: UpdateOrderAddressRequest) -> StatusResponse:
    command = UpdateOrderAddress(order_id=body.order_id, address=body.address)
    current_domain.process(command, asynchronous=False)
    return StatusResponse(message="Order updated")
