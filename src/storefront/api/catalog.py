"""FastAPI endpoints for the product catalog."""

from fastapi import APIRouter, Depends, Query, Response
from protean.utils.globals import current_domain

from storefront.api.dependencies import require_admin
from storefront.api.schemas import (
    CreateProductRequest,
    ProductResponse,
    StatusResponse,
    UpdateProductRequest,
)
from storefront.api.views import product_view
from storefront.catalog.creation import CreateProduct
from storefront.catalog.details import DeleteProduct, UpdateProduct
from storefront.catalog.product import Product

product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.post(
    "",
    status_code=201,
    response_model=ProductResponse,
    dependencies=[Depends(require_admin)],
)
async def create_product(body: CreateProductRequest) -> ProductResponse:
    command = CreateProduct(
        name=body.name,
        price=body.price,
        description=body.description,
        stock=body.stock,
        image_url=body.image_url,
        category_id=body.category_id,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return product_view(current_domain.repository_for(Product).get(product_id))


@product_router.get("", response_model=list[ProductResponse])
async def list_products(
    response: Response,
    search: str | None = None,
    category_id: str | None = Query(default=None, alias="categoryId"),
) -> list[ProductResponse]:
    products = current_domain.repository_for(Product).search(search=search, category_id=category_id)
    response.headers["X-Total-Count"] = str(len(products))
    return [product_view(product) for product in products]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return product_view(current_domain.repository_for(Product).get(product_id))


@product_router.put(
    "/{product_id}",
    response_model=ProductResponse,
    dependencies=[Depends(require_admin)],
)
async def update_product(product_id: str, body: UpdateProductRequest) -> ProductResponse:
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        price=body.price,
        description=body.description,
        stock=body.stock,
        image_url=body.image_url,
        category_id=body.category_id,
    )
    current_domain.process(command, asynchronous=False)
    return product_view(current_domain.repository_for(Product).get(product_id))


@product_router.delete(
    "/{product_id}",
    response_model=StatusResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_product(product_id: str) -> StatusResponse:
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return StatusResponse(message="Product deleted")
