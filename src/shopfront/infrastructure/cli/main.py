import logging

import click

from shopfront.infrastructure.cli.auth_commands import login, profile_show
from shopfront.infrastructure.cli.cart_commands import cart_quote, checkout
from shopfront.infrastructure.cli.catalog_commands import (
    catalog_categories,
    catalog_list,
    catalog_subcategory,
)
from shopfront.domain.service.credential_policy import POLICIES
from shopfront.infrastructure.config import Settings


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr.")
@click.option(
    "--page-size",
    type=click.IntRange(min=1),
    default=Settings.page_size,
    show_default=True,
    envvar="SHOPFRONT_PAGE_SIZE",
    help="Products per catalog page.",
)
@click.option(
    "--latency/--no-latency",
    default=True,
    envvar="SHOPFRONT_LATENCY",
    help="Simulate network delays.",
)
@click.option(
    "--auth-policy",
    type=click.Choice(list(POLICIES)),
    default=Settings.auth_policy,
    show_default=True,
    envvar="SHOPFRONT_AUTH_POLICY",
    help="Credential rule used by the sign-in service.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, page_size: int, latency: bool, auth_policy: str) -> None:
    """Shopfront — demo store catalog, cart and sign-in"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = Settings(
        page_size=page_size,
        catalog_latency=Settings.catalog_latency if latency else 0.0,
        login_latency=Settings.login_latency if latency else 0.0,
        auth_policy=auth_policy,
    )


@cli.group()
def catalog() -> None:
    """Browse the catalog."""


@cli.group()
def cart() -> None:
    """Work with a cart."""


@cli.group()
def profile() -> None:
    """User profile."""


# Register subcommands
catalog.add_command(catalog_list)
catalog.add_command(catalog_categories)
catalog.add_command(catalog_subcategory)
cart.add_command(cart_quote)
profile.add_command(profile_show)
cli.add_command(checkout)
cli.add_command(login)
