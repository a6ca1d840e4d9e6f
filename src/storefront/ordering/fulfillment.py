"""Admin fulfillment — status transitions and shipment details."""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.domain import logger, storefront
from storefront.ordering.order import Order


@storefront.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, max_length=20)


@storefront.command(part_of="Order")
class UpdateOrderDetails:
    order_id = Identifier(required=True)
    tracking_number = String(max_length=100)
    admin_note = Text()


@storefront.command_handler(part_of=Order)
class FulfillmentHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        previous_status = order.status
        order.update_status(command.status)
        repo.add(order)

        logger.info(
            "order_status_changed",
            order_id=str(command.order_id),
            previous_status=previous_status,
            new_status=order.status,
        )

    @handle(UpdateOrderDetails)
    def update_order_details(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.annotate(
            tracking_number=command.tracking_number,
            admin_note=command.admin_note,
        )
        repo.add(order)
        return str(order.id)
