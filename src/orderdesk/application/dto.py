"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money is pre-formatted
(e.g. "$15.00"); quantities are rendered as plain decimal strings.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: str
    currency: str


@dataclass(frozen=True)
class DraftLineDTO:
    """A single draft line as displayed to the user."""

    product_id: str
    product_name: str
    quantity: str
    unit_price: str
    cost: str


@dataclass(frozen=True)
class DraftDTO:
    """A draft plus the freshly recomputed availability and total."""

    id: int
    customer_name: str
    status: str
    order_id: int | None
    delivery_date: str | None
    lines: list[DraftLineDTO]
    available: list[ProductDTO]
    selected_product_id: str | None
    total: str

    @property
    def can_add(self) -> bool:
        return self.status == "EDITABLE" and self.selected_product_id is not None


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single order item as displayed to the user."""

    product_id: str
    product_name: str
    quantity: str
    unit_price: str
    cost: str
    status: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_name: str
    status: str
    delivery_date: str | None
    items: list[OrderLineItemDTO]
    total: str
    created_at: str


@dataclass(frozen=True)
class OrderSummaryDTO:
    id: int
    customer_name: str
    status: str
    delivery_date: str | None
    total: str
