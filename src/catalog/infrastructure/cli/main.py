import dataclasses
import logging
from pathlib import Path

import click

from catalog.infrastructure.cli.auth_commands import auth_whoami
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_search,
    product_show,
    product_update,
)
from catalog.infrastructure.config import ConfigurationError, load_settings


@click.group()
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Catalog JSON file (overrides CATALOG_DATA_PATH).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_file: Path | None, verbose: bool) -> None:
    """Catalog: a JSON-file product catalog."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        raise click.ClickException(str(exc)) from exc
    if data_file is not None:
        settings = dataclasses.replace(
            settings, data_path=data_file.parent, products_file=data_file.name
        )
    ctx.obj = settings


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def auth() -> None:
    """Check credentials."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_search)
product.add_command(product_show)
product.add_command(product_update)
auth.add_command(auth_whoami)
