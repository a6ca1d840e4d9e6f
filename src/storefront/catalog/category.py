"""Category aggregate root for grouping products."""

from datetime import UTC, datetime

from protean.fields import DateTime, String

from storefront.catalog.events import CategoryCreated
from storefront.domain import storefront


@storefront.aggregate(limit=-1)
class Category:
    """A named grouping of products in the catalog."""

    name: String(required=True, max_length=100)
    created_at: DateTime(default=lambda: datetime.now(UTC))

    @classmethod
    def create(cls, name):
        category = cls(name=name, created_at=datetime.now(UTC))
        category.raise_(
            CategoryCreated(
                category_id=str(category.id),
                name=name,
            )
        )
        return category
