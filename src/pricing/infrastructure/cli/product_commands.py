"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click
import httpx

from pricing.application.pricing_service import PricingService
from pricing.domain.exceptions import DomainException
from pricing.infrastructure.bootstrap import pricing_service
from pricing.infrastructure.client import PricingApiClient


def _service(ctx: click.Context) -> PricingService | PricingApiClient:
    """Talk to the API when a URL was given, otherwise to the local store."""
    api_url = ctx.obj.get("api_url") if ctx.obj else None
    if api_url:
        return ctx.with_resource(PricingApiClient(api_url))
    return pricing_service(ctx.obj.get("settings") if ctx.obj else None)


@click.command("list")
@click.pass_context
def product_list(ctx: click.Context) -> None:
    """List all products in the catalog."""
    try:
        products = _service(ctx).list_products()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except httpx.HTTPError as exc:
        raise click.ClickException(f"Pricing API request failed: {exc}")

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}  Last updated")
    click.echo("-" * 60)
    for p in products:
        updated = p.last_updated.strftime("%Y-%m-%d %H:%M UTC")
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10.2f}  {updated}")


@click.command("history")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_context
def product_history(ctx: click.Context, product_id: int) -> None:
    """Show the past prices of a product."""
    try:
        history = _service(ctx).get_product_history(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except httpx.HTTPError as exc:
        raise click.ClickException(f"Pricing API request failed: {exc}")

    click.echo(f"Product #{history.id} '{history.name}'")
    if not history.price_history:
        click.echo("No price changes recorded.")
        return
    for entry in history.price_history:
        click.echo(f"  {entry.date:%Y-%m-%d %H:%M}  {entry.price:>10.2f}")


@click.command("update-price")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.pass_context
def product_update_price(ctx: click.Context, product_id: int, price: str) -> None:
    """Set a new price for a product."""
    try:
        product = _service(ctx).update_price(product_id, price)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except httpx.HTTPError as exc:
        raise click.ClickException(f"Pricing API request failed: {exc}")

    click.echo(f"Product #{product.id} price updated to ${product.price:.2f}")


@click.command("apply-discount")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--percentage", required=True, help="Discount in percent, 0 to 100.")
@click.pass_context
def product_apply_discount(ctx: click.Context, product_id: int, percentage: str) -> None:
    """Cut a product's price by a percentage."""
    try:
        result = _service(ctx).apply_discount(product_id, percentage)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except httpx.HTTPError as exc:
        raise click.ClickException(f"Pricing API request failed: {exc}")

    click.echo(
        f"Product #{result.id} '{result.name}' discounted from "
        f"${result.original_price:.2f} to ${result.discounted_price:.2f}"
    )
