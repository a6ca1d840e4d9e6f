"""Product details management — update and delete commands and handler."""

from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalog.category import Category
from storefront.catalog.product import Product
from storefront.domain import logger, storefront


@storefront.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(max_length=255)
    price: Float(min_value=0.0)
    description: Text()
    stock: Integer(min_value=0)
    image_url: String(max_length=500)
    category_id: Identifier()


@storefront.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


@storefront.command_handler(part_of=Product)
class ManageProductDetailsHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        if command.category_id:
            current_domain.repository_for(Category).get(command.category_id)

        product.update_details(
            name=command.name,
            price=command.price,
            description=command.description,
            stock=command.stock,
            image_url=command.image_url,
            category_id=command.category_id,
        )
        repo.add(product)

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        repo._dao.delete(product)
        logger.info("product_deleted", product_id=str(command.product_id))
