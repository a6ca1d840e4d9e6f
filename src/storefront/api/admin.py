"""FastAPI endpoints for the admin panel. Every route requires an admin token."""

from fastapi import APIRouter, Depends, Response
from protean.utils.globals import current_domain

from storefront import settings
from storefront.account.user import User
from storefront.api.dependencies import require_admin
from storefront.api.schemas import (
    AdminOrderResponse,
    CategoryResponse,
    CreateCategoryRequest,
    OrderResponse,
    StatusResponse,
    UpdateOrderDetailsRequest,
    UpdateOrderStatusRequest,
    UserResponse,
)
from storefront.api.views import admin_order_views, category_view, order_view, user_view
from storefront.catalog.category import Category
from storefront.catalog.management import CreateCategory
from storefront.ordering.fulfillment import UpdateOrderDetails, UpdateOrderStatus
from storefront.ordering.order import Order
from storefront.ordering.removal import DeleteOrder

admin_router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
@admin_router.get("/orders", response_model=list[AdminOrderResponse])
async def list_orders(response: Response, status: str | None = None, search: str | None = None):
    user_ids = None
    if search:
        user_ids = [str(user.id) for user in current_domain.repository_for(User).search_by_name(search)]

    orders = current_domain.repository_for(Order).list_placed(status=status, user_ids=user_ids)
    response.headers["X-Total-Count"] = str(len(orders))
    return admin_order_views(orders)


@admin_router.delete("/orders/{order_id}", response_model=StatusResponse)
async def delete_order(order_id: str) -> StatusResponse:
    current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)
    return StatusResponse(message="Order deleted")


@admin_router.post("/orders/{order_id}/status", response_model=StatusResponse)
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest) -> StatusResponse:
    command = UpdateOrderStatus(order_id=order_id, status=body.status)
    current_domain.process(command, asynchronous=False)
    return StatusResponse(message="Order status updated")


@admin_router.post("/orders/{order_id}/details", response_model=OrderResponse)
async def update_order_details(order_id: str, body: UpdateOrderDetailsRequest) -> OrderResponse:
    command = UpdateOrderDetails(
        order_id=order_id,
        tracking_number=body.tracking_number,
        admin_note=body.admin_note,
    )
    current_domain.process(command, asynchronous=False)
    return order_view(current_domain.repository_for(Order).get(order_id))


# ---------------------------------------------------------------------------
# Users and categories
# ---------------------------------------------------------------------------
@admin_router.get("/users", response_model=list[UserResponse])
async def list_users(response: Response) -> list[UserResponse]:
    users = current_domain.repository_for(User).list_all(exclude_email=settings.admin_email())
    response.headers["X-Total-Count"] = str(len(users))
    return [user_view(user) for user in users]


@admin_router.get("/category", response_model=list[CategoryResponse])
async def list_categories(response: Response) -> list[CategoryResponse]:
    categories = current_domain.repository_for(Category).list_all()
    response.headers["X-Total-Count"] = str(len(categories))
    return [category_view(category) for category in categories]


@admin_router.post("/category", status_code=201, response_model=CategoryResponse)
async def create_category(body: CreateCategoryRequest) -> CategoryResponse:
    category_id = current_domain.process(CreateCategory(name=body.name), asynchronous=False)
    return category_view(current_domain.repository_for(Category).get(category_id))
