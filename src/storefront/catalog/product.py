"""Product aggregate root."""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from storefront.catalog.events import ProductCreated, ProductDetailsUpdated
from storefront.domain import storefront

# Fields a product update may touch
UPDATABLE_FIELDS = ("name", "price", "description", "stock", "image_url", "category_id")


@storefront.aggregate(limit=-1)
class Product:
    """A sellable catalog item, optionally filed under a Category."""

    name: String(required=True, max_length=255)
    price: Float(min_value=0.0, default=0.0)
    description: Text()
    stock: Integer(min_value=0, default=0)
    image_url: String(max_length=500)
    category_id: Identifier()
    created_at: DateTime(default=lambda: datetime.now(UTC))
    updated_at: DateTime(default=lambda: datetime.now(UTC))

    @classmethod
    def create(cls, name, price=None, description=None, stock=None, image_url=None, category_id=None):
        now = datetime.now(UTC)
        product = cls(
            name=name,
            price=price if price is not None else 0.0,
            description=description,
            stock=stock if stock is not None else 0,
            image_url=image_url,
            category_id=category_id,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=str(product.id),
                name=name,
                price=product.price,
                category_id=str(category_id) if category_id else None,
                created_at=now,
            )
        )
        return product

    def update_details(self, **changes):
        """Merge the supplied fields into the product; ``None`` values are ignored."""
        unknown = set(changes) - set(UPDATABLE_FIELDS)
        if unknown:
            raise TypeError(f"Cannot update product fields: {', '.join(sorted(unknown))}")

        applied = {field: value for field, value in changes.items() if value is not None}
        for field, value in applied.items():
            setattr(self, field, value)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductDetailsUpdated(
                product_id=str(self.id),
                name=self.name,
                price=self.price,
                stock=self.stock,
                category_id=str(self.category_id) if self.category_id else None,
            )
        )
        return applied
