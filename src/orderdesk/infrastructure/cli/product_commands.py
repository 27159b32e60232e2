"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from orderdesk.application.add_product import AddProductHandler
from orderdesk.application.list_products import ListProductsHandler
from orderdesk.application.update_product import UpdateProductHandler
from orderdesk.domain.exceptions import DomainException
from orderdesk.infrastructure.bootstrap import product_repository, settings


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option(
    "--currency", default=None,
    help="ISO currency code (defaults to ORDERDESK_CURRENCY).",
)
def product_add(name: str, price: str, currency: str | None) -> None:
    """Append a product to the end of the catalog."""
    handler = AddProductHandler(
        product_repo=product_repository(),
        currency=(currency or settings().currency).upper(),
    )

    try:
        product = handler.handle(name=name, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
def product_list() -> None:
    """List the catalog in the order drafts offer it."""
    try:
        products = ListProductsHandler(product_repo=product_repository()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products in the catalog.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>14} {'Cur':<4}")
    click.echo("-" * 47)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>14} {p.currency:<4}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
def product_update(product_id: str, price: str) -> None:
    """Reprice a product.  Lines already on drafts keep their old price."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{product.name} (#{product.id}) now costs {product.price}")
