"""Query methods for the Order aggregate."""

from storefront.domain import storefront
from storefront.ordering.order import Order


@storefront.repository(part_of=Order)
class OrderRepository:
    def find_cart_for(self, user_id) -> Order | None:
        """The user's open cart, or None if they have not added anything yet."""
        return (
            self._dao.query.filter(user_id=str(user_id), is_cart=True)
            .order_by("created_at")
            .all()
            .first
        )

    def placed_for(self, user_id) -> list[Order]:
        return (
            self._dao.query.filter(user_id=str(user_id), is_cart=False)
            .order_by("created_at")
            .all()
            .items
        )

    def list_placed(self, status: str | None = None, user_ids=None) -> list[Order]:
        """Placed orders, optionally narrowed to a status and a set of owners.

        ``user_ids`` of None means any owner; an empty collection matches nothing.
        """
        if user_ids is not None and not user_ids:
            return []

        criteria = {"is_cart": False}
        if status:
            criteria["status"] = status
        if user_ids is not None:
            criteria["user_id__in"] = [str(user_id) for user_id in user_ids]

        return self._dao.query.filter(**criteria).order_by("-created_at").all().items
