"""Order aggregate: a submitted, persisted order.

Orders are only ever created or revised from a submitted draft.  The
``__init__`` is intentionally simple so the repository can reconstitute
persisted orders without re-validating.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from orderdesk.domain.exceptions import UnknownLineError, ValidationError
from orderdesk.domain.model.value_objects import Money, Quantity
from orderdesk.domain.service.line_costs import line_cost, order_total


class OrderStatus(Enum):
    UNCONFIRMED = "UNCONFIRMED"
    CONFIRMED = "CONFIRMED"
    IN_PROCESS = "IN_PROCESS"
    READY = "READY"
    DELIVERED = "DELIVERED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


# Orders in these states are closed for edits.
CLOSED_STATUSES = frozenset({OrderStatus.COMPLETED, OrderStatus.CANCELLED})


class ItemStatus(Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


@dataclass
class OrderLineItem:
    """Captures the price snapshot of a product at the time it was ordered."""

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked when the draft line was added
    status: ItemStatus = ItemStatus.TODO

    @property
    def cost(self) -> Money:
        return line_cost(self)


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use ``Order.create()`` for new orders and ``revise()`` for edits;
    both enforce the business rules.
    """

    id: int | None
    customer_name: str
    items: list[OrderLineItem]
    delivery_date: datetime | None = None
    status: OrderStatus = OrderStatus.UNCONFIRMED
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_name: str,
        items: list[OrderLineItem],
        delivery_date: datetime | None = None,
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        _validate(customer_name, items)
        return Order(
            id=None,
            customer_name=customer_name.strip(),
            items=list(items),
            delivery_date=delivery_date,
        )

    # --- Mutations ------------------------------------------------------------

    def revise(
        self,
        customer_name: str,
        items: list[OrderLineItem],
        delivery_date: datetime | None = None,
    ) -> None:
        """Replace the order's contents with an edited item list.

        Items that survive the edit keep their work status; new items
        start as TODO.
        """
        if self.status in CLOSED_STATUSES:
            raise ValidationError(
                f"Cannot edit order in {self.status.value} status"
            )
        _validate(customer_name, items)

        previous = {item.product_id: item.status for item in self.items}
        for item in items:
            item.status = previous.get(item.product_id, ItemStatus.TODO)

        self.customer_name = customer_name.strip()
        self.items = list(items)
        self.delivery_date = delivery_date

    def cancel(self) -> None:
        """Transition any open status -> CANCELLED."""
        if self.status == OrderStatus.CANCELLED:
            raise ValidationError("Order is already cancelled")
        if self.status == OrderStatus.COMPLETED:
            raise ValidationError("Cannot cancel order in COMPLETED status")
        self.status = OrderStatus.CANCELLED

    def set_status(self, status: OrderStatus) -> None:
        """Move an open order to *status*.

        Open statuses may be set in any order.  COMPLETED and CANCELLED
        are terminal.
        """
        if status == OrderStatus.CANCELLED:
            self.cancel()
            return
        if self.status in CLOSED_STATUSES:
            raise ValidationError(
                f"Cannot change status of order in {self.status.value} status"
            )
        if status == self.status:
            raise ValidationError(f"Order is already {status.value}")
        self.status = status

    def set_item_status(self, product_id: str, status: ItemStatus) -> OrderLineItem:
        if self.status in CLOSED_STATUSES:
            raise ValidationError(
                f"Cannot update items of order in {self.status.value} status"
            )
        for item in self.items:
            if item.product_id == product_id:
                item.status = status
                return item
        raise UnknownLineError(
            f"Product ID '{product_id}' is not on order #{self.id}"
        )

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        currency = self.items[0].unit_price.currency if self.items else "USD"
        return order_total(self.items, currency)

    @property
    def is_editable(self) -> bool:
        return self.status not in CLOSED_STATUSES


def _validate(customer_name: str, items: list[OrderLineItem]) -> None:
    if not customer_name or not customer_name.strip():
        raise ValidationError("Customer name is required")

    if not items:
        raise ValidationError("Order must contain at least one item")

    seen: set[str] = set()
    for item in items:
        if item.product_id in seen:
            raise ValidationError(
                f"Product '{item.product_name}' appears more than once"
            )
        seen.add(item.product_id)
