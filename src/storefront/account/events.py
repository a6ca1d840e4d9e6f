"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="User")
class UserRegistered:
    """A new user account was created."""

    __version__ = 1

    user_id: Identifier(required=True)
    email: String(required=True, max_length=254)
    role: String(required=True, max_length=20)
    registered_at: DateTime(required=True)


@storefront.event(part_of="User")
class ProfileUpdated:
    """A user's name, phone or address changed."""

    __version__ = 1

    user_id: Identifier(required=True)
    name: String(max_length=100)
    phone: String(max_length=20)
    address: String(max_length=500)
