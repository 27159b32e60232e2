"""Application service: order and item status use cases.

Orders move through UNCONFIRMED -> CONFIRMED -> IN_PROCESS -> READY ->
DELIVERED -> COMPLETED while each item is tracked TODO -> IN_PROGRESS ->
DONE.
"""

from __future__ import annotations

import logging

from orderdesk.application.dto import OrderDTO
from orderdesk.application.mapping import order_to_dto
from orderdesk.domain.exceptions import EntityNotFoundError, ValidationError
from orderdesk.domain.model.order import ItemStatus, Order, OrderStatus
from orderdesk.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


def parse_order_status(value: str) -> OrderStatus:
    try:
        return OrderStatus(value.strip().upper().replace("-", "_"))
    except ValueError:
        raise ValidationError(f"Unknown order status '{value}'")


def parse_item_status(value: str) -> ItemStatus:
    try:
        return ItemStatus(value.strip().upper().replace("-", "_"))
    except ValueError:
        raise ValidationError(f"Unknown item status '{value}'")


class _OrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def _load(self, order_id: int) -> Order:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return order


class SetOrderStatusHandler(_OrderHandler):

    def handle(self, order_id: int, status: str) -> OrderDTO:
        order = self._load(order_id)
        previous = order.status
        order.set_status(parse_order_status(status))
        self._order_repo.save(order)

        logger.info(
            "Order #%s: %s -> %s", order_id, previous.value, order.status.value
        )
        return order_to_dto(order)


class SetItemStatusHandler(_OrderHandler):

    def handle(self, order_id: int, product_id: str, status: str) -> OrderDTO:
        order = self._load(order_id)
        item = order.set_item_status(product_id, parse_item_status(status))
        self._order_repo.save(order)

        logger.info(
            "Order #%s: %s is %s", order_id, item.product_name, item.status.value
        )
        return order_to_dto(order)
