"""Query methods for the User aggregate."""

from storefront.account.user import User
from storefront.domain import storefront


@storefront.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email: str) -> User | None:
        """Find a user by email (case-insensitive)."""
        if not email:
            return None
        return self._dao.query.filter(email=email.strip().lower()).all().first

    def list_all(self, exclude_email: str | None = None) -> list[User]:
        """All users, optionally leaving out one email address."""
        users = self._dao.query.order_by("registered_at").all().items
        if exclude_email:
            users = [user for user in users if user.email != exclude_email]
        return users

    def search_by_name(self, term: str) -> list[User]:
        """Users whose name contains ``term``, ignoring case."""
        return self._dao.query.filter(name__icontains=term).all().items

    def get_many(self, user_ids) -> dict[str, User]:
        ids = list({str(user_id) for user_id in user_ids if user_id})
        if not ids:
            return {}
        users = self._dao.query.filter(id__in=ids).all().items
        return {str(user.id): user for user in users}
