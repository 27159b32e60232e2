import click

from orderdesk.infrastructure.bootstrap import settings
from orderdesk.infrastructure.cli.draft_commands import (
    draft_add,
    draft_cancel,
    draft_edit,
    draft_new,
    draft_prune,
    draft_qty,
    draft_remove,
    draft_select,
    draft_show,
    draft_submit,
)
from orderdesk.infrastructure.cli.order_commands import (
    order_cancel,
    order_item_status,
    order_list,
    order_show,
    order_status,
)
from orderdesk.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_update,
)
from orderdesk.infrastructure.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (overrides ORDERDESK_LOG_LEVEL).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Shortcut for --log-level INFO.")
def cli(log_level: str | None, verbose: bool) -> None:
    """orderdesk: compose, submit and track customer orders."""
    if log_level is None:
        log_level = "INFO" if verbose else settings().log_level
    setup_logging(log_level)
    logger.debug("Data directory: %s", settings().data_dir)


@cli.group()
def draft() -> None:
    """Compose order drafts."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
draft.add_command(draft_add)
draft.add_command(draft_cancel)
draft.add_command(draft_edit)
draft.add_command(draft_new)
draft.add_command(draft_prune)
draft.add_command(draft_qty)
draft.add_command(draft_remove)
draft.add_command(draft_select)
draft.add_command(draft_show)
draft.add_command(draft_submit)
order.add_command(order_cancel)
order.add_command(order_item_status)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
