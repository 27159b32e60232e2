"""OrderDraft aggregate: an order while it is still being composed.

The draft owns its lines and enforces the line-level invariants:

- a product appears on at most one line
- a line's ``unit_price`` is captured when the line is added and never
  recomputed from the catalog
- quantities set by the user are strictly positive

A just-added line starts at quantity zero; ``submit()`` refuses to hand
over a draft that still contains one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum

from orderdesk.domain.exceptions import (
    DraftNotEditableError,
    DuplicateProductError,
    InvalidQuantityError,
    UnknownLineError,
    ValidationError,
)
from orderdesk.domain.model.order import Order
from orderdesk.domain.model.product import Product
from orderdesk.domain.model.value_objects import Money, to_decimal
from orderdesk.domain.service.line_costs import line_cost, order_total


class DraftStatus(Enum):
    EDITABLE = "EDITABLE"
    SUBMITTED = "SUBMITTED"


@dataclass
class OrderLine:
    """One product on a draft, with its price snapshot."""

    product_id: str
    product_name: str
    unit_price: Money  # locked when the line is added
    quantity: Decimal = Decimal("0")

    @property
    def cost(self) -> Money:
        return line_cost(self)


@dataclass
class OrderDraft:
    """Aggregate root for an in-progress order.

    ``order_id`` is None for a brand new order and holds the persisted
    order's id when the draft was loaded for editing.
    """

    id: int | None
    customer_name: str
    lines: list[OrderLine] = field(default_factory=list)
    selected_product_id: str | None = None
    delivery_date: datetime | None = None
    order_id: int | None = None
    status: DraftStatus = DraftStatus.EDITABLE
    currency: str = "USD"
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def new(
        customer_name: str,
        delivery_date: datetime | None = None,
        currency: str = "USD",
    ) -> OrderDraft:
        """Start an empty draft for a new order."""
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")
        return OrderDraft(
            id=None,
            customer_name=customer_name.strip(),
            delivery_date=delivery_date,
            currency=currency,
        )

    @staticmethod
    def from_order(order: Order) -> OrderDraft:
        """Seed a draft from a persisted order's items.

        Quantities and price snapshots are taken over as they are.
        """
        lines = [
            OrderLine(
                product_id=item.product_id,
                product_name=item.product_name,
                unit_price=item.unit_price,
                quantity=item.quantity.value,
            )
            for item in order.items
        ]
        currency = order.items[0].unit_price.currency if order.items else "USD"
        return OrderDraft(
            id=None,
            customer_name=order.customer_name,
            lines=lines,
            delivery_date=order.delivery_date,
            order_id=order.id,
            currency=currency,
        )

    # --- Line mutations -------------------------------------------------------

    def add_line(self, product: Product) -> OrderLine:
        """Append a zero-quantity line for *product* at its current price."""
        self.ensure_editable()
        if self.find_line(product.id) is not None:
            raise DuplicateProductError(
                f"'{product.name}' is already on this order"
            )
        if product.price.currency != self.currency:
            raise ValidationError(
                f"'{product.name}' is priced in {product.price.currency}; "
                f"this order is in {self.currency}"
            )
        line = OrderLine(
            product_id=product.id,
            product_name=product.name,
            unit_price=product.price,
        )
        self.lines.append(line)
        return line

    def remove_line(self, product_id: str) -> bool:
        """Drop the line for *product_id*; returns False if there was none."""
        self.ensure_editable()
        line = self.find_line(product_id)
        if line is None:
            return False
        self.lines.remove(line)
        return True

    def update_quantity(self, product_id: str, quantity: str | int | Decimal) -> OrderLine:
        self.ensure_editable()
        line = self.find_line(product_id)
        if line is None:
            raise UnknownLineError(f"Product ID '{product_id}' is not on this order")
        try:
            value = to_decimal(quantity)
        except (InvalidOperation, ValueError) as exc:
            raise InvalidQuantityError(f"Invalid quantity: {quantity!r}") from exc
        if value <= 0:
            raise InvalidQuantityError(
                "Quantity must be positive; remove the line to drop it"
            )
        line.quantity = value
        return line

    # --- State transitions ----------------------------------------------------

    def submit(self) -> None:
        """Transition EDITABLE -> SUBMITTED.

        The draft must name a customer and hold at least one line, and
        every line must carry a positive quantity.
        """
        self.ensure_editable()
        self.check_submittable()
        self.status = DraftStatus.SUBMITTED

    def check_submittable(self) -> None:
        if not self.customer_name or not self.customer_name.strip():
            raise ValidationError("Customer name is required")
        if not self.lines:
            raise ValidationError("Order must contain at least one item")
        unset = [line.product_name for line in self.lines if line.quantity <= 0]
        if unset:
            raise ValidationError(
                "Set a quantity for: " + ", ".join(unset)
            )

    def ensure_editable(self) -> None:
        if self.status != DraftStatus.EDITABLE:
            raise DraftNotEditableError(
                f"Draft #{self.id} was already submitted; start a new draft to edit"
            )

    # --- Queries --------------------------------------------------------------

    @property
    def is_editable(self) -> bool:
        return self.status == DraftStatus.EDITABLE

    @property
    def product_ids(self) -> set[str]:
        return {line.product_id for line in self.lines}

    @property
    def total(self) -> Money:
        return order_total(self.lines, self.currency)

    def find_line(self, product_id: str) -> OrderLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None
