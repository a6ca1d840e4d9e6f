"""User registration — command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront import settings
from storefront.account.user import Role, User
from storefront.domain import logger, storefront


@storefront.command(part_of="User")
class RegisterUser:
    """Create a new user account."""

    email: String(required=True, max_length=254)
    password: String(required=True, max_length=128)
    name: String(max_length=100)
    phone: String(max_length=20)
    address: String(max_length=500)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise ValidationError({"email": ["Email already registered"]})

        email = command.email.strip().lower()
        role = Role.ADMIN.value if email == settings.admin_email() else Role.CUSTOMER.value

        user = User.register(
            email=email,
            password=command.password,
            name=command.name,
            phone=command.phone,
            address=command.address,
            role=role,
        )
        repo.add(user)
        logger.info("user_registered", user_id=str(user.id), role=role)
        return str(user.id)
