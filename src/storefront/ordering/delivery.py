"""Delivery address changes on placed orders."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.ordering.order import Order


@storefront.command(part_of="Order")
class UpdateOrderAddress:
    order_id = Identifier(required=True)
    address = String(required=True, max_length=500)


@storefront.command_handler(part_of=Order)
class UpdateOrderAddressHandler:
    @handle(UpdateOrderAddress)
    def update_order_address(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.change_address(command.address)
        repo.add(order)
