"""CLI commands for the cart and the checkout stub."""

from __future__ import annotations

import click

from shopfront.application.checkout import PaymentMethod
from shopfront.application.dto import CartLineDTO, ItemSpec
from shopfront.domain.exceptions import DomainException, EntityNotFoundError
from shopfront.domain.model.cart import clamp_quantity
from shopfront.infrastructure.bootstrap import App
from shopfront.infrastructure.cli.catalog_commands import load_catalog
from shopfront.infrastructure.config import Settings


def _parse_items(raw: str) -> list[ItemSpec]:
    """Turn 'Blender:3,Backpack:1' into cart requests.

    Quantities outside the stepper range are clamped, with a note on stderr.
    """
    specs: list[ItemSpec] = []
    for entry in filter(None, (part.strip() for part in raw.split(","))):
        name, sep, qty_text = entry.rpartition(":")
        name = name.strip()
        if not sep or not name:
            raise click.BadParameter(
                f"Cannot read '{entry}'. Expected 'ProductName:Quantity'.",
                param_hint="--items",
            )
        try:
            requested = int(qty_text)
        except ValueError:
            raise click.BadParameter(
                f"Quantity for '{name}' must be a whole number, got '{qty_text}'.",
                param_hint="--items",
            )
        quantity = clamp_quantity(requested)
        if quantity != requested:
            click.echo(f"Quantity {requested} for '{name}' adjusted to {quantity}.", err=True)
        specs.append(ItemSpec(product_name=name, quantity=quantity))
    if not specs:
        raise click.BadParameter("No items given.", param_hint="--items")
    return specs


def _fill_cart(app: App, specs: list[ItemSpec]) -> None:
    for spec in specs:
        product = app.catalog.find_by_name(spec.product_name)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{spec.product_name}'")
        app.cart.add(product, spec.quantity)


def _display_lines(lines: list[CartLineDTO], total: str) -> None:
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in lines:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Cart Total':<27} {total:>20}")


@click.command("quote")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
@click.pass_obj
def cart_quote(settings: Settings, items: str) -> None:
    """Add items to a fresh cart and show its total."""
    specs = _parse_items(items)
    app = load_catalog(settings)

    try:
        _fill_cart(app, specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart ({app.cart.item_count()} items)")
    click.echo()
    _display_lines(app.cart.line_dtos(), str(app.cart.total()))


@click.command("checkout")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
@click.option(
    "--payment",
    type=click.Choice([m.value for m in PaymentMethod]),
    default=PaymentMethod.CREDIT_CARD.value,
    show_default=True,
    help="Payment method.",
)
@click.pass_obj
def checkout(settings: Settings, items: str, payment: str) -> None:
    """Show the order summary for a cart (no payment is taken)."""
    specs = _parse_items(items)
    app = load_catalog(settings)

    try:
        _fill_cart(app, specs)
        summary = app.checkout.handle(PaymentMethod(payment))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Order Summary")
    click.echo()
    _display_lines(summary.items, summary.total)
    click.echo()
    click.echo(f"Payment method: {summary.payment_method}")
    click.echo("Order placed (demo checkout, nothing was charged).")
