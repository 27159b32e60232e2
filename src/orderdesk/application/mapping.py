"""Domain -> DTO mapping shared by the use-case handlers."""

from __future__ import annotations

from datetime import datetime

from orderdesk.application.dto import (
    DraftDTO,
    DraftLineDTO,
    OrderDTO,
    OrderLineItemDTO,
    OrderSummaryDTO,
    ProductDTO,
)
from orderdesk.domain.model.draft import OrderDraft
from orderdesk.domain.model.order import Order
from orderdesk.domain.model.product import Product
from orderdesk.domain.service.availability import Availability


def _format_date(value: datetime | None) -> str | None:
    if value is None:
        return None
    return value.strftime("%Y-%m-%d %H:%M")


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=str(product.price),
        currency=product.price.currency,
    )


def draft_to_dto(draft: OrderDraft, availability: Availability) -> DraftDTO:
    return DraftDTO(
        id=draft.id,  # type: ignore[arg-type]
        customer_name=draft.customer_name,
        status=draft.status.value,
        order_id=draft.order_id,
        delivery_date=_format_date(draft.delivery_date),
        lines=[
            DraftLineDTO(
                product_id=line.product_id,
                product_name=line.product_name,
                quantity=str(line.quantity),
                unit_price=str(line.unit_price),
                cost=str(line.cost),
            )
            for line in draft.lines
        ],
        available=[product_to_dto(p) for p in availability.available],
        selected_product_id=draft.selected_product_id,
        total=str(draft.total),
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_name=order.customer_name,
        status=order.status.value,
        delivery_date=_format_date(order.delivery_date),
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=str(item.quantity),
                unit_price=str(item.unit_price),
                cost=str(item.cost),
                status=item.status.value,
            )
            for item in order.items
        ],
        total=str(order.total),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def order_to_summary(order: Order) -> OrderSummaryDTO:
    return OrderSummaryDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_name=order.customer_name,
        status=order.status.value,
        delivery_date=_format_date(order.delivery_date),
        total=str(order.total),
    )
