"""Product creation — command and handler."""

from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalog.category import Category
from storefront.catalog.product import Product
from storefront.domain import storefront


@storefront.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    price: Float(min_value=0.0)
    description: Text()
    stock: Integer(min_value=0)
    image_url: String(max_length=500)
    category_id: Identifier()


@storefront.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        if command.category_id:
            # Raises ObjectNotFoundError for an unknown category
            current_domain.repository_for(Category).get(command.category_id)

        product = Product.create(
            name=command.name,
            price=command.price,
            description=command.description,
            stock=command.stock,
            image_url=command.image_url,
            category_id=command.category_id,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
