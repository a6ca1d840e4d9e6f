"""Cart item management — commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.account.user import User
from storefront.catalog.product import Product
from storefront.domain import logger, storefront
from storefront.ordering.locks import user_cart_lock
from storefront.ordering.order import Order


@storefront.command(part_of="Order")
class AddToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(min_value=1, default=1)


@storefront.command(part_of="Order")
class RemoveFromCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


def process_cart_command(command):
    """Dispatch a cart command while holding the owning user's cart lock."""
    with user_cart_lock(command.user_id):
        return current_domain.process(command, asynchronous=False)


@storefront.command_handler(part_of=Order)
class ManageCartHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        # Raises ObjectNotFoundError for an unknown user or product
        current_domain.repository_for(User).get(command.user_id)
        current_domain.repository_for(Product).get(command.product_id)

        repo = current_domain.repository_for(Order)
        cart = repo.find_cart_for(command.user_id)
        if cart is None:
            cart = Order.open_cart(command.user_id)

        cart.add_item(product_id=command.product_id, quantity=command.quantity or 1)
        repo.add(cart)

        logger.info(
            "cart_item_added",
            order_id=str(cart.id),
            user_id=str(command.user_id),
            product_id=str(command.product_id),
            quantity=command.quantity or 1,
        )
        return str(cart.id)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(Order)
        cart = repo.find_cart_for(command.user_id)
        if cart is None:
            raise ObjectNotFoundError({"cart": [f"No cart for user {command.user_id}"]})

        cart.remove_item(command.product_id)
        repo.add(cart)

        logger.info(
            "cart_item_removed",
            order_id=str(cart.id),
            user_id=str(command.user_id),
            product_id=str(command.product_id),
        )
        return str(cart.id)
