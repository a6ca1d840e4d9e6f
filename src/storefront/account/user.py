"""User aggregate root — identity, credentials, profile and role."""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String
from werkzeug.security import check_password_hash, generate_password_hash

from storefront.account.events import ProfileUpdated, UserRegistered
from storefront.domain import storefront


class Role(Enum):
    """Enumeration of user roles."""

    ADMIN = "admin"
    CUSTOMER = "customer"


@storefront.aggregate(limit=-1)
class User:
    """A registered shopper or the store administrator.

    Emails are unique and stored lower-cased. The password is kept only as a
    salted one-way hash; the plaintext never reaches the repository.
    """

    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=255)
    name: String(max_length=100)
    phone: String(max_length=20)
    address: String(max_length=500)
    role: String(choices=Role, default=Role.CUSTOMER.value)
    registered_at: DateTime(default=lambda: datetime.now(UTC))

    @invariant.post
    def email_must_be_well_formed(self):
        email = self.email or ""
        local_part, _, domain_part = email.partition("@")
        if (
            any(ch.isspace() for ch in email)
            or email.count("@") != 1
            or not local_part
            or "." not in domain_part.strip(".")
        ):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

    @classmethod
    def register(cls, email, password, name=None, phone=None, address=None, role=Role.CUSTOMER.value):
        if not password:
            raise ValidationError({"password": ["Password is required"]})

        now = datetime.now(UTC)
        user = cls(
            email=email.strip().lower(),
            password_hash=generate_password_hash(password),
            name=name,
            phone=phone,
            address=address,
            role=role,
            registered_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                email=user.email,
                role=role,
                registered_at=now,
            )
        )
        return user

    @property
    def is_admin(self):
        return self.role == Role.ADMIN.value

    def check_password(self, password):
        if not self.password_hash or password is None:
            return False
        return check_password_hash(self.password_hash, password)

    def update_profile(self, name=None, phone=None, address=None):
        """Apply a partial profile update; ``None`` keeps the current value."""
        if name is not None:
            self.name = name
        if phone is not None:
            self.phone = phone
        if address is not None:
            self.address = address

        self.raise_(
            ProfileUpdated(
                user_id=str(self.id),
                name=self.name,
                phone=self.phone,
                address=self.address,
            )
        )
