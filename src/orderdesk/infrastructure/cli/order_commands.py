"""CLI commands for the Order aggregate."""

from __future__ import annotations

from datetime import datetime

import click

from orderdesk.application.cancel_order import CancelOrderHandler
from orderdesk.application.dto import OrderDTO
from orderdesk.application.order_status import SetItemStatusHandler, SetOrderStatusHandler
from orderdesk.application.show_order import ListOrdersHandler, ShowOrderHandler
from orderdesk.domain.exceptions import DomainException
from orderdesk.infrastructure.bootstrap import order_repository


def display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    if dto.delivery_date:
        click.echo(f"Delivery: {dto.delivery_date}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()

    click.echo(
        f"  {'ID':<6} {'Product':<20} {'Qty':>8} {'Price':>10} {'Cost':>10} {'Status':>12}"
    )
    click.echo(f"  {'-'*71}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<6} {item.product_name:<20} {item.quantity:>8} "
            f"{item.unit_price:>10} {item.cost:>10} {item.status:>12}"
        )
    click.echo(f"  {'-'*71}")
    click.echo(f"  {'Order Total':<34} {dto.total:>24}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("list")
@click.option(
    "--status", "statuses", multiple=True,
    help="Only orders in this status (repeatable).",
)
@click.option("--customer", default=None, help="Filter by part of the customer name.")
@click.option(
    "--from", "delivery_from", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
    help="Only orders delivered on or after this day (YYYY-MM-DD).",
)
@click.option(
    "--to", "delivery_to", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
    help="Only orders delivered on or before this day (YYYY-MM-DD).",
)
def order_list(
    statuses: tuple[str, ...],
    customer: str | None,
    delivery_from: datetime | None,
    delivery_to: datetime | None,
) -> None:
    """List orders."""
    handler = ListOrdersHandler(order_repo=order_repository())

    try:
        orders = handler.handle(
            statuses=list(statuses),
            customer_name=customer,
            delivery_from=delivery_from.date() if delivery_from else None,
            delivery_to=delivery_to.date() if delivery_to else None,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<20} {'Delivery':<17} {'Status':<12} {'Total':>10}")
    click.echo("-" * 69)
    for o in orders:
        click.echo(
            f"{o.id:<6} {o.customer_name:<20} {o.delivery_date or '-':<17} "
            f"{o.status:<12} {o.total:>10}"
        )


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
def order_cancel(order_id: int) -> None:
    """Cancel an order."""
    handler = CancelOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} cancelled.")


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option(
    "--status", required=True,
    help="UNCONFIRMED, CONFIRMED, IN_PROCESS, READY, DELIVERED, COMPLETED or CANCELLED.",
)
def order_status(order_id: int, status: str) -> None:
    """Move an order to another status."""
    handler = SetOrderStatusHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} is now {dto.status}.")


@click.command("item-status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--product", "product_id", required=True, help="Product ID of the item.")
@click.option("--status", required=True, help="TODO, IN_PROGRESS or DONE.")
def order_item_status(order_id: int, product_id: str, status: str) -> None:
    """Track work on a single order item."""
    handler = SetItemStatusHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, product_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)
