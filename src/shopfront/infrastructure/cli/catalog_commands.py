"""CLI commands for browsing the catalog."""

from __future__ import annotations

import asyncio

import click

from shopfront.application.dto import ProductDTO
from shopfront.domain.exceptions import DomainException
from shopfront.domain.model.catalog_query import SortOption
from shopfront.domain.model.value_objects import Money
from shopfront.infrastructure.bootstrap import App, build_app
from shopfront.infrastructure.config import Settings


def load_catalog(settings: Settings) -> App:
    """Build the app and fetch the catalog, failing the command on error."""
    app = build_app(settings)
    asyncio.run(app.catalog.load())
    if app.catalog.last_error:
        raise click.ClickException(app.catalog.last_error)
    return app


def _display_products(products: list[ProductDTO]) -> None:
    click.echo(f"{'Name':<20} {'Category':<12} {'Price':>10} {'Rating':>7} {'Reviews':>8}")
    click.echo("-" * 61)
    for p in products:
        click.echo(
            f"{p.name:<20} {p.category:<12} {p.price:>10} {p.rating:>7} {p.review_count:>8}"
        )


@click.command("list")
@click.option("--search", "-s", default="", help="Case-insensitive text to find in product names.")
@click.option("--category", "-c", default=None, help="Only show this category.")
@click.option(
    "--sort",
    "sort_value",
    type=click.Choice([o.value for o in SortOption]),
    default=SortOption.FEATURED.value,
    show_default=True,
    help="Sort order.",
)
@click.option("--page", type=click.IntRange(min=1), default=1, show_default=True, help="Page number.")
@click.pass_obj
def catalog_list(settings: Settings, search: str, category: str | None, sort_value: str, page: int) -> None:
    """List products, one page at a time."""
    app = load_catalog(settings)
    catalog = app.catalog
    catalog.set_search_text(search)
    catalog.set_category(category)
    catalog.set_sort_option(SortOption(sort_value))
    catalog.set_page(page)

    matches = len(catalog.filtered_and_sorted())
    products = catalog.current_page_products()
    if not products:
        click.echo("No products found.")
        return

    _display_products([ProductDTO.from_product(p) for p in products])
    click.echo()
    click.echo(f"Page {catalog.current_page} of {catalog.page_count()} ({matches} products)")


@click.command("categories")
@click.pass_obj
def catalog_categories(settings: Settings) -> None:
    """List product categories."""
    app = load_catalog(settings)
    for category in app.catalog.categories():
        count = len(app.catalog.products_in_category(category))
        click.echo(f"{category:<15} {count:>3} items")


@click.command("subcategory")
@click.option("--category", "-c", default="Sports", show_default=True, help="Parent category.")
@click.option("--keyword", "-k", required=True, help="Word to look for in descriptions (e.g. Running).")
@click.option("--min-price", default="0", show_default=True, help="Lowest price to include.")
@click.option("--max-price", default="1000", show_default=True, help="Highest price to include.")
@click.option(
    "--sort",
    "sort_value",
    type=click.Choice([o.value for o in SortOption]),
    default=SortOption.FEATURED.value,
    show_default=True,
    help="Sort order (featured and newest keep catalog order).",
)
@click.pass_obj
def catalog_subcategory(
    settings: Settings,
    category: str,
    keyword: str,
    min_price: str,
    max_price: str,
    sort_value: str,
) -> None:
    """List products of a category whose description mentions a keyword."""
    app = load_catalog(settings)

    try:
        products = app.catalog.subcategory(
            category,
            keyword,
            min_price=Money.of(min_price).amount,
            max_price=Money.of(max_price).amount,
            sort_option=SortOption(sort_value),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{keyword} in {category}: {len(products)} items")
    if products:
        click.echo()
        _display_products([ProductDTO.from_product(p) for p in products])
