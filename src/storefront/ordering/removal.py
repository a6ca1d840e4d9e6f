"""Order deletion. Deleting an order that does not exist is a no-op."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.domain import logger, storefront
from storefront.ordering.order import Order


@storefront.command(part_of="Order")
class DeleteOrder:
    order_id = Identifier(required=True)


@storefront.command_handler(part_of=Order)
class DeleteOrderHandler:
    @handle(DeleteOrder)
    def delete_order(self, command):
        repo = current_domain.repository_for(Order)
        try:
            order = repo.get(command.order_id)
        except ObjectNotFoundError:
            logger.debug("order_already_deleted", order_id=str(command.order_id))
            return

        for item in list(order.items):
            order.remove_items(item)
        repo.add(order)
        repo._dao.delete(order)

        logger.info("order_deleted", order_id=str(command.order_id))
