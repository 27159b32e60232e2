"""Line cost calculator.

Works on anything that exposes ``unit_price`` (Money) and ``quantity``
(Decimal or Quantity), so draft lines and persisted order items share
the same arithmetic.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from typing import Protocol

from orderdesk.domain.model.value_objects import Money, Quantity


class CostedLine(Protocol):
    unit_price: Money

    @property
    def quantity(self) -> Decimal | Quantity: ...


def _quantity_value(line: CostedLine) -> Decimal:
    qty = line.quantity
    return qty.value if isinstance(qty, Quantity) else qty


def line_cost(line: CostedLine) -> Money:
    """``unit_price * quantity`` in exact decimal arithmetic."""
    return line.unit_price * _quantity_value(line)


def order_total(lines: Iterable[CostedLine], currency: str = "USD") -> Money:
    """Sum of ``line_cost`` over *lines*; an empty collection totals zero."""
    result = Money.zero(currency)
    for line in lines:
        result = result + line_cost(line)
    return result
