"""Query methods for the catalog aggregates."""

from storefront.catalog.category import Category
from storefront.catalog.product import Product
from storefront.domain import storefront


@storefront.repository(part_of=Product)
class ProductRepository:
    def search(self, search: str | None = None, category_id: str | None = None) -> list[Product]:
        """Products matching every supplied filter.

        ``search`` is a case-insensitive substring of the name; ``category_id``
        must match exactly. Omitted filters do not constrain the result.
        """
        criteria = {}
        if search:
            criteria["name__icontains"] = search
        if category_id:
            criteria["category_id"] = category_id

        query = self._dao.query.filter(**criteria) if criteria else self._dao.query
        return query.order_by("created_at").all().items

    def get_many(self, product_ids) -> dict[str, Product]:
        """Map of id to product for the ids that still exist."""
        ids = list({str(product_id) for product_id in product_ids if product_id})
        if not ids:
            return {}
        products = self._dao.query.filter(id__in=ids).all().items
        return {str(product.id): product for product in products}


@storefront.repository(part_of=Category)
class CategoryRepository:
    def list_all(self) -> list[Category]:
        return self._dao.query.order_by("created_at").all().items
