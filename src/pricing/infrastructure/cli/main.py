import click
import uvicorn

from pricing.infrastructure.api.app import create_app
from pricing.infrastructure.cli.product_commands import (
    product_apply_discount,
    product_history,
    product_list,
    product_update_price,
)
from pricing.infrastructure.config import get_settings
from pricing.infrastructure.logging import setup_logging


@click.group()
@click.option(
    "--api-url",
    default=None,
    help="Base URL of a running pricing API. Defaults to PRICING_API_URL; "
    "without one, commands use the local product store.",
)
@click.pass_context
def cli(ctx: click.Context, api_url: str | None) -> None:
    """Product Pricing"""
    settings = get_settings()
    setup_logging(settings)
    ctx.ensure_object(dict)
    ctx.obj.setdefault("settings", settings)
    ctx.obj.setdefault("api_url", api_url or settings.API_URL)


@cli.group()
def product() -> None:
    """Manage product prices."""


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (default PRICING_HOST).")
@click.option("--port", default=None, type=int, help="Port (default PRICING_PORT).")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None) -> None:
    """Run the products API."""
    settings = ctx.obj["settings"]
    uvicorn.run(
        create_app(settings),
        host=host or settings.HOST,
        port=port or settings.PORT,
        log_config=None,
    )


# Register subcommands
product.add_command(product_list)
product.add_command(product_history)
product.add_command(product_update_price)
product.add_command(product_apply_discount)
