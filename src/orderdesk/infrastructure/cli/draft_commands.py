"""CLI commands for composing order drafts.

Each command maps one user intent onto its use-case handler and prints
the draft back, so the user always sees the current lines, the product
proposed for the next line and the running total.
"""

from __future__ import annotations

from datetime import datetime

import click

from orderdesk.application.cancel_draft import CancelDraftHandler, PruneDraftsHandler
from orderdesk.application.compose_draft import (
    AddLineHandler,
    RemoveLineHandler,
    SelectProductHandler,
    SetQuantityHandler,
    ShowDraftHandler,
)
from orderdesk.application.dto import DraftDTO
from orderdesk.application.start_draft import EditOrderHandler, StartDraftHandler
from orderdesk.application.submit_draft import SubmitDraftHandler
from orderdesk.domain.exceptions import DomainException
from orderdesk.infrastructure.bootstrap import (
    draft_repository,
    order_repository,
    product_repository,
    settings,
)
from orderdesk.infrastructure.cli.order_commands import display_order

DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%d %H:%M", "%Y-%m-%dT%H:%M"]


def display_draft(dto: DraftDTO) -> None:
    """Shared formatting for displaying a draft."""
    origin = f"editing order #{dto.order_id}" if dto.order_id else "new order"
    click.echo(f"Draft #{dto.id}  (status={dto.status}, {origin})")
    click.echo(f"Customer: {dto.customer_name}")
    if dto.delivery_date:
        click.echo(f"Delivery: {dto.delivery_date}")
    click.echo()

    click.echo(f"  {'ID':<6} {'Product':<20} {'Qty':>8} {'Price':>10} {'Cost':>10}")
    click.echo(f"  {'-'*58}")
    if not dto.lines:
        click.echo("  No items")
    for line in dto.lines:
        click.echo(
            f"  {line.product_id:<6} {line.product_name:<20} {line.quantity:>8} "
            f"{line.unit_price:>10} {line.cost:>10}"
        )
    click.echo(f"  {'-'*58}")
    click.echo(f"  {'Order Total':<27} {dto.total:>31}")

    if dto.status != "EDITABLE":
        return
    click.echo()
    if dto.can_add:
        names = ", ".join(
            f"*{p.name}*" if p.id == dto.selected_product_id else p.name
            for p in dto.available
        )
        click.echo(f"Can add: {names}")
    else:
        click.echo("Every product is already on this order.")


@click.command("new")
@click.option("--customer", required=True, help="Customer name.")
@click.option(
    "--delivery",
    type=click.DateTime(formats=DATE_FORMATS),
    default=None,
    help="Delivery date (YYYY-MM-DD [HH:MM]).",
)
def draft_new(customer: str, delivery: datetime | None) -> None:
    """Start a draft for a new order."""
    handler = StartDraftHandler(
        draft_repo=draft_repository(),
        product_repo=product_repository(),
        currency=settings().currency,
    )

    try:
        dto = handler.handle(customer_name=customer, delivery_date=delivery)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_draft(dto)


@click.command("edit")
@click.option("--order", "order_id", required=True, type=int, help="Order ID to edit.")
def draft_edit(order_id: int) -> None:
    """Load an existing order into a new draft."""
    handler = EditOrderHandler(
        draft_repo=draft_repository(),
        order_repo=order_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_draft(dto)


@click.command("show")
@click.option("--id", "draft_id", required=True, type=int, help="Draft ID.")
def draft_show(draft_id: int) -> None:
    """Show a draft with its available products and total."""
    handler = ShowDraftHandler(draft_repository(), product_repository())

    try:
        dto = handler.handle(draft_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_draft(dto)


@click.command("select")
@click.option("--id", "draft_id", required=True, type=int, help="Draft ID.")
@click.option("--product", "product_id", required=True, help="Product ID to propose next.")
def draft_select(draft_id: int, product_id: str) -> None:
    """Choose which product the next 'add' will use."""
    handler = SelectProductHandler(draft_repository(), product_repository())

    try:
        dto = handler.handle(draft_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_draft(dto)


@click.command("add")
@click.option("--id", "draft_id", required=True, type=int, help="Draft ID.")
@click.option(
    "--product", "product_id", default=None,
    help="Product ID to add (defaults to the proposed product).",
)
def draft_add(draft_id: int, product_id: str | None) -> None:
    """Add a line (quantity 0) to the draft."""
    handler = AddLineHandler(draft_repository(), product_repository())

    try:
        dto = handler.handle(draft_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_draft(dto)


@click.command("remove")
@click.option("--id", "draft_id", required=True, type=int, help="Draft ID.")
@click.option("--product", "product_id", required=True, help="Product ID to remove.")
def draft_remove(draft_id: int, product_id: str) -> None:
    """Remove a line from the draft."""
    handler = RemoveLineHandler(draft_repository(), product_repository())

    try:
        dto = handler.handle(draft_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_draft(dto)


@click.command("qty")
@click.option("--id", "draft_id", required=True, type=int, help="Draft ID.")
@click.option("--product", "product_id", required=True, help="Product ID of the line.")
@click.option("--quantity", required=True, help="New quantity (e.g. 3 or 1.5).")
def draft_qty(draft_id: int, product_id: str, quantity: str) -> None:
    """Set the quantity of a line."""
    handler = SetQuantityHandler(draft_repository(), product_repository())

    try:
        dto = handler.handle(draft_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_draft(dto)


@click.command("submit")
@click.option("--id", "draft_id", required=True, type=int, help="Draft ID.")
def draft_submit(draft_id: int) -> None:
    """Submit the draft as a new or updated order."""
    handler = SubmitDraftHandler(
        draft_repo=draft_repository(),
        order_repo=order_repository(),
    )

    try:
        dto = handler.handle(draft_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Draft #{draft_id} submitted.")
    click.echo()
    display_order(dto)


@click.command("cancel")
@click.option("--id", "draft_id", required=True, type=int, help="Draft ID.")
def draft_cancel(draft_id: int) -> None:
    """Discard a draft without touching any order."""
    handler = CancelDraftHandler(draft_repo=draft_repository())

    try:
        handler.handle(draft_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Draft #{draft_id} discarded.")


@click.command("prune")
def draft_prune() -> None:
    """Delete drafts that were already submitted."""
    pruned = PruneDraftsHandler(draft_repo=draft_repository()).handle()

    if not pruned:
        click.echo("No submitted drafts to prune.")
        return
    click.echo("Pruned draft(s): " + ", ".join(f"#{d}" for d in pruned))
