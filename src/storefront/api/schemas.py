"""Pydantic request/response schemas for the storefront API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands. Request bodies accept both snake_case and the
camelCase keys older clients send; responses are always snake_case.
"""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class RequestSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Account requests
# ---------------------------------------------------------------------------
class RegisterRequest(RequestSchema):
    email: str
    password: str = Field(min_length=1, max_length=128)
    name: str | None = None
    phone: str | None = None
    address: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "email": "jane@example.com",
                    "password": "s3cret-pass",
                    "name": "Jane Doe",
                    "phone": "+1-555-0100",
                    "address": "1 Main St, Springfield",
                }
            ]
        }
    }


class LoginRequest(RequestSchema):
    email: str
    password: str


class UpdateProfileRequest(RequestSchema):
    name: str | None = None
    phone: str | None = None
    address: str | None = None


# ---------------------------------------------------------------------------
# Catalog requests
# ---------------------------------------------------------------------------
class CreateProductRequest(RequestSchema):
    name: str = Field(min_length=1, max_length=255)
    price: float = Field(ge=0, default=0.0)
    description: str | None = None
    stock: int = Field(ge=0, default=0)
    image_url: str | None = None
    category_id: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Espresso Cup",
                    "price": 12.5,
                    "description": "Porcelain, 90ml",
                    "stock": 40,
                    "imageUrl": "https://cdn.example.com/cup.jpg",
                    "categoryId": "cat-001",
                }
            ]
        }
    }


class UpdateProductRequest(RequestSchema):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    price: float | None = Field(default=None, ge=0)
    description: str | None = None
    stock: int | None = Field(default=None, ge=0)
    image_url: str | None = None
    category_id: str | None = None


class CreateCategoryRequest(RequestSchema):
    name: str = Field(
        min_length=1,
        max_length=100,
        validation_alias=AliasChoices("name", "category_name", "categoryName"),
    )


# ---------------------------------------------------------------------------
# Cart and order requests
# ---------------------------------------------------------------------------
class AddToCartRequest(RequestSchema):
    user_id: str
    product_id: str
    quantity: int = Field(ge=1, default=1)


class RemoveFromCartRequest(RequestSchema):
    user_id: str
    product_id: str


class CheckoutItem(RequestSchema):
    product_id: str = Field(validation_alias=AliasChoices("product_id", "productId", "id"))
    quantity: int = Field(ge=1, default=1)


class UserSnapshot(RequestSchema):
    id: str
    address: str | None = None


class CheckoutRequest(RequestSchema):
    user_id: str | None = None
    user: UserSnapshot | None = None
    items: list[CheckoutItem] = Field(min_length=1)
    total_price: float = Field(ge=0, default=0.0, validation_alias=AliasChoices("total_price", "totalPrice", "total"))

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user": {"id": "user-001", "address": "1 Main St, Springfield"},
                    "items": [{"id": "prod-001", "quantity": 2}],
                    "total": 40.0,
                }
            ]
        }
    }

    @model_validator(mode="after")
    def owner_is_known(self):
        if not self.user_id and self.user is None:
            raise ValueError("user_id or user is required")
        return self

    @property
    def owner_id(self) -> str:
        return self.user_id or self.user.id

    @property
    def address(self) -> str | None:
        return self.user.address if self.user else None


class UpdateOrderAddressRequest(RequestSchema):
    order_id: str = Field(validation_alias=AliasChoices("order_id", "orderId", "id"))
    address: str = Field(min_length=1, max_length=500)


class UpdateOrderStatusRequest(RequestSchema):
    status: str = Field(validation_alias=AliasChoices("status", "order_status", "orderStatus"))


class UpdateOrderDetailsRequest(RequestSchema):
    tracking_number: str | None = None
    admin_note: str | None = None


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"
    message: str | None = None


class CategoryResponse(BaseModel):
    id: str
    name: str
    created_at: datetime | None = None


class ProductResponse(BaseModel):
    id: str
    name: str
    price: float
    description: str | None = None
    stock: int
    image_url: str | None = None
    category_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OrderItemResponse(BaseModel):
    id: str
    product_id: str
    quantity: int
    added_at: datetime | None = None
    product: ProductResponse | None = None


class OrderResponse(BaseModel):
    id: str
    user_id: str
    total_price: float
    is_cart: bool
    status: str
    tracking_number: str | None = None
    admin_note: str | None = None
    order_date: datetime | None = None
    address: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    items: list[OrderItemResponse] = []


class UserResponse(BaseModel):
    id: str
    email: str
    name: str | None = None
    phone: str | None = None
    address: str | None = None
    role: str
    registered_at: datetime | None = None


class AdminOrderResponse(OrderResponse):
    user: UserResponse | None = None


class UserProfileResponse(UserResponse):
    orders: list[OrderResponse] = []
    cart: OrderResponse | None = None


class LoginResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    user: UserProfileResponse
