"""CLI commands for the Product aggregate."""

from __future__ import annotations

from decimal import Decimal

import click

from catalog.application import responses
from catalog.application.add_product import AddProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import ProductDTO, ProductInput
from catalog.application.list_products import ListProductsHandler
from catalog.application.search_products import SearchProductsHandler
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.domain.model.user import Permission
from catalog.domain.service.product_query import (
    DEFAULT_PER_PAGE,
    SORT_FIELDS,
    ProductFilters,
    ProductQuery,
)
from catalog.infrastructure.bootstrap import product_repository
from catalog.infrastructure.cli.common import (
    credential_options,
    decimal_option,
    echo_json,
    fail,
    json_option,
    require,
)
from catalog.infrastructure.config import StorageSettings


def _display_products(products: list[ProductDTO]) -> None:
    """Shared formatting for displaying a list of products."""
    click.echo(f"{'ID':<6} {'Title':<30} {'Price':>14}  {'Created':<25}")
    click.echo("-" * 78)
    for p in products:
        click.echo(f"{p.id:<6} {p.title:<30} {p.formatted_price:>14}  {p.created_at:<25}")


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product #{dto.id}")
    click.echo(f"Title:    {dto.title}")
    click.echo(f"Price:    {dto.formatted_price}")
    click.echo(f"Created:  {dto.created_at}")


@click.command("list")
@click.option("--page", default=1, type=int, show_default=True, help="Page number.")
@click.option("--per-page", default=DEFAULT_PER_PAGE, type=int, show_default=True, help="Items per page (max 100).")
@click.option("--sort-by", default="id", show_default=True, help=f"One of: {', '.join(SORT_FIELDS)}.")
@click.option("--order", default="asc", show_default=True, help="asc or desc.")
@click.option("--min-price", callback=decimal_option, default=None, help="Inclusive lower price bound.")
@click.option("--max-price", callback=decimal_option, default=None, help="Inclusive upper price bound.")
@click.option("--date-from", default=None, help="Inclusive ISO-8601 lower bound on created_at.")
@click.option("--date-to", default=None, help="Inclusive ISO-8601 upper bound on created_at.")
@click.option("--search", default=None, help="Case-insensitive title substring.")
@json_option
@click.pass_obj
def product_list(
    settings: StorageSettings,
    page: int,
    per_page: int,
    sort_by: str,
    order: str,
    min_price: Decimal | None,
    max_price: Decimal | None,
    date_from: str | None,
    date_to: str | None,
    search: str | None,
    as_json: bool,
) -> None:
    """List products with filters, sorting and pagination."""
    query = ProductQuery(
        filters=ProductFilters(
            min_price=min_price,
            max_price=max_price,
            date_from=date_from,
            date_to=date_to,
            search=search,
        ),
        sort_by=sort_by,
        order=order,
        page=page,
        per_page=per_page,
    )
    try:
        result = ListProductsHandler(product_repo=product_repository(settings)).handle(query)
    except DomainException as exc:
        fail(exc, settings, as_json)
        return

    if as_json:
        echo_json(
            responses.paginated([p.to_dict() for p in result.products], result.pagination_dict())
        )
        return

    if not result.products:
        click.echo("No products found.")
        return

    _display_products(result.products)
    if result.pagination is not None:
        pg = result.pagination
        click.echo(
            f"Page {pg.current_page}/{pg.total_pages} ({pg.total_items} matching products)"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID to display.")
@json_option
@click.pass_obj
def product_show(settings: StorageSettings, product_id: int, as_json: bool) -> None:
    """Show a single product."""
    try:
        dto = ShowProductHandler(product_repo=product_repository(settings)).handle(product_id)
    except DomainException as exc:
        fail(exc, settings, as_json)
        return

    if as_json:
        echo_json(responses.success(dto.to_dict(), "Product retrieved successfully"))
    else:
        _display_product(dto)


@click.command("search")
@click.option("--query", "text", required=True, help="Text to look for in titles.")
@json_option
@click.pass_obj
def product_search(settings: StorageSettings, text: str, as_json: bool) -> None:
    """Search products by title."""
    try:
        results = SearchProductsHandler(product_repo=product_repository(settings)).handle(text)
    except DomainException as exc:
        fail(exc, settings, as_json)
        return

    if as_json:
        echo_json(responses.success([p.to_dict() for p in results], "Search completed"))
        return

    if not results:
        click.echo("No products found.")
        return
    _display_products(results)


@click.command("add")
@click.option("--title", required=True, help="Product title.")
@click.option("--price", required=True, help="Price (e.g. 19.99).")
@credential_options
@json_option
@click.pass_obj
def product_add(
    settings: StorageSettings,
    title: str,
    price: str,
    username: str | None,
    password: str | None,
    as_json: bool,
) -> None:
    """Add a new product to the catalog."""
    try:
        require(Permission.CREATE, username, password)
        handler = AddProductHandler(product_repo=product_repository(settings))
        dto = handler.handle(ProductInput(title=title, price=price))
    except DomainException as exc:
        fail(exc, settings, as_json)
        return

    if as_json:
        echo_json(responses.created(dto.to_dict(), "Product created successfully"))
    else:
        click.echo(f"Product #{dto.id} '{dto.title}' added at {dto.formatted_price}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--title", default=None, help="New title.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@credential_options
@json_option
@click.pass_obj
def product_update(
    settings: StorageSettings,
    product_id: int,
    title: str | None,
    price: str | None,
    username: str | None,
    password: str | None,
    as_json: bool,
) -> None:
    """Update a product's title and/or price."""
    if title is None and price is None:
        raise click.UsageError("Nothing to update: pass --title and/or --price.")

    try:
        require(Permission.UPDATE, username, password)
        handler = UpdateProductHandler(product_repo=product_repository(settings))
        dto = handler.handle(product_id, ProductInput(title=title, price=price))
    except DomainException as exc:
        fail(exc, settings, as_json)
        return

    if as_json:
        echo_json(responses.updated(dto.to_dict(), "Product updated successfully"))
    else:
        click.echo(f"Product #{dto.id} updated: '{dto.title}' at {dto.formatted_price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@credential_options
@json_option
@click.pass_obj
def product_delete(
    settings: StorageSettings,
    product_id: int,
    username: str | None,
    password: str | None,
    as_json: bool,
) -> None:
    """Delete a product (admin only)."""
    try:
        require(Permission.DELETE, username, password)
        DeleteProductHandler(product_repo=product_repository(settings)).handle(product_id)
    except DomainException as exc:
        fail(exc, settings, as_json)
        return

    if as_json:
        echo_json(responses.deleted("Product deleted successfully"))
    else:
        click.echo(f"Product #{product_id} deleted.")
