"""Application service: Show / List Orders use cases (queries)."""

from __future__ import annotations

from datetime import date

from orderdesk.application.dto import OrderDTO, OrderSummaryDTO
from orderdesk.application.mapping import order_to_dto, order_to_summary
from orderdesk.application.order_status import parse_order_status
from orderdesk.domain.exceptions import EntityNotFoundError, ValidationError
from orderdesk.domain.model.order import Order
from orderdesk.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return order_to_dto(order)


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        statuses: list[str] | None = None,
        customer_name: str | None = None,
        delivery_from: date | None = None,
        delivery_to: date | None = None,
    ) -> list[OrderSummaryDTO]:
        """List orders, optionally filtered.

        ``customer_name`` matches case-insensitively on any part of the name.
        ``delivery_from`` and ``delivery_to`` are inclusive calendar days;
        when either is given, orders without a delivery date are left out.
        """
        wanted = {parse_order_status(s) for s in statuses} if statuses else None
        needle = customer_name.strip().lower() if customer_name else None
        if delivery_from and delivery_to and delivery_from > delivery_to:
            raise ValidationError(
                f"Delivery range starts after it ends ({delivery_from} > {delivery_to})"
            )

        result: list[OrderSummaryDTO] = []
        for order in self._order_repo.list_all():
            if wanted is not None and order.status not in wanted:
                continue
            if needle and needle not in order.customer_name.lower():
                continue
            if not _delivers_within(order, delivery_from, delivery_to):
                continue
            result.append(order_to_summary(order))
        return result


def _delivers_within(order: Order, start: date | None, end: date | None) -> bool:
    if start is None and end is None:
        return True
    if order.delivery_date is None:
        return False
    day = order.delivery_date.date()
    if start is not None and day < start:
        return False
    if end is not None and day > end:
        return False
    return True
