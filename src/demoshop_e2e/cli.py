"""CLI entry point for the Demo Web Shop suite."""

import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from .config import load_config
from .errors import DemoShopError
from .logging_config import setup_logging
from .runner import DEFAULT_SUITE, SuiteRunner
from .testdata import load_order_data

console = Console()
log = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="demoshop-e2e")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Config file path")
@click.option("--log-level", default=None, help="Override the configured log level")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, log_level: str | None) -> None:
    """Demo Web Shop - guest checkout end-to-end suite."""
    ctx.ensure_object(dict)

    config = load_config(Path(config_path) if config_path else None)
    ctx.obj["config"] = config

    setup_logging(log_level or config.log_level)
    log.debug("Storefront: %s", config.url)


@main.command()
@click.option("--data", "data_path", type=click.Path(exists=True), help="Order data file (JSON or YAML)")
@click.option("--format", "-f", "output_format", type=click.Choice(["table", "json"]), default="table")
@click.pass_context
def plan(ctx: click.Context, data_path: str | None, output_format: str) -> None:
    """Show the products the journey buys and the expected cart subtotal."""
    config = ctx.obj["config"]
    path = Path(data_path) if data_path else config.order_data

    try:
        order = load_order_data(path)
        ledger = order.build_ledger(tolerance=config.ledger.tolerance)
    except DemoShopError as e:
        raise click.ClickException(str(e)) from e

    if output_format == "json":
        click.echo(json.dumps({
            "products": [
                {
                    "category": p.category,
                    "name": p.name,
                    "quantity": p.quantity,
                    "unitPrice": str(p.expected_price),
                    "subtotal": str(p.expected_subtotal),
                }
                for p in order.products
            ],
            "expectedSubtotal": str(ledger.computed_subtotal()),
        }, indent=2))
        return

    table = Table(title="Order Plan")
    table.add_column("Category", style="cyan")
    table.add_column("Product", style="bold")
    table.add_column("Qty", justify="right")
    table.add_column("Unit price", justify="right")
    table.add_column("Subtotal", justify="right", style="green")

    for product in order.products:
        table.add_row(
            product.category,
            product.name,
            str(product.quantity),
            f"${product.expected_price:,.2f}",
            f"${product.expected_subtotal:,.2f}",
        )

    console.print(table)

    address = order.shipping_details
    console.print(f"\n[bold]Ship to:[/] {address.first_name} {address.last_name}, {address.city}, {address.country}")
    console.print(f"[bold]Expected subtotal:[/] ${ledger.computed_subtotal():,.2f}\n")


@main.command()
@click.option("--suite", "-s", default=str(DEFAULT_SUITE), show_default=True, help="Path to the e2e tests")
@click.option("--headed", is_flag=True, help="Show the browser window")
@click.option("--browser", type=click.Choice(["chromium", "firefox", "webkit"]), default=None)
@click.option("-k", "keyword", default=None, help="Only run tests matching this pytest expression")
@click.pass_context
def run(ctx: click.Context, suite: str, headed: bool, browser: str | None, keyword: str | None) -> None:
    """Run the browser journeys against the storefront."""
    config = ctx.obj["config"]
    runner = SuiteRunner(config)

    console.print(f"\n[bold blue]Running e2e suite:[/] {suite}")
    console.print(f"[dim]Storefront: {config.url} | Browser: {browser or config.browser.name}"
                  f"{' (headed)' if headed else ''}[/]\n")

    with console.status("[yellow]Running tests...[/]"):
        result = runner.run(Path(suite), keyword=keyword, headed=headed, browser=browser)

    if result.success:
        console.print("[bold green]✓ All journeys passed![/]\n")
        return

    if result.failures:
        table = Table(title="Failed Journeys")
        table.add_column("Test", style="cyan", max_width=50)
        table.add_column("Error", style="yellow")
        table.add_column("Message", style="dim", max_width=60)

        for failure in result.failures:
            table.add_row(
                f"{failure.test_file.name}::{failure.test_name}",
                failure.error_type,
                failure.error_message,
            )
        console.print(table)
    else:
        console.print(result.output[-2000:], markup=False, highlight=False)

    console.print(f"\n[bold red]✗ pytest exited with code {result.return_code}[/]\n")
    ctx.exit(result.return_code)


if __name__ == "__main__":
    main()
