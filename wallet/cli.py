"""Typer CLI interface for the wallet toolkit."""

import asyncio
import json
import logging
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from pathlib import Path

import typer

from wallet.exceptions import WalletError

app = typer.Typer(
    name="wallet",
    help="Wallet balance normalization, price lookups and swap quotes.",
)

OUTPUT_FORMATS = ("table", "json", "text")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Wallet balance normalization, price lookups and swap quotes."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _fetch_prices() -> dict[str, Decimal]:
    """Fetch the remote feed; an unreachable feed yields an empty table."""
    from wallet.config import get_settings
    from wallet.prices import PriceFetcher

    settings = get_settings()
    fetcher = PriceFetcher.from_settings(settings)
    max_age = timedelta(days=settings.price_max_age_days) if settings.price_max_age_days else None
    return asyncio.run(fetcher.fetch_or_empty(as_of=datetime.now(UTC), max_age=max_age))


def _load_prices(prices_file: Path | None, fetch: bool) -> dict[str, Decimal]:
    from wallet.prices import load_price_file

    if prices_file is not None:
        return load_price_file(prices_file)
    if fetch:
        return _fetch_prices()
    typer.echo("Warning: no price source given; USD values will be 0.", err=True)
    return {}


def _load_priorities(priorities_file: Path | None) -> dict[str, int]:
    from wallet.engines.priorities import DEFAULT_CHAIN_PRIORITIES

    if priorities_file is None:
        return dict(DEFAULT_CHAIN_PRIORITIES)
    if not priorities_file.exists():
        raise FileNotFoundError(f"File not found: {priorities_file}")
    raw = json.loads(priorities_file.read_text())
    if not isinstance(raw, dict) or not all(
        isinstance(value, int) and not isinstance(value, bool) for value in raw.values()
    ):
        raise ValueError(f"{priorities_file.name} must be a JSON object of chain -> integer priority")
    return raw


def _print_balance_table(balances: list) -> None:
    from rich.console import Console
    from rich.table import Table

    table = Table(title="Wallet Balances")
    table.add_column("Currency", style="bold")
    table.add_column("Chain")
    table.add_column("Amount", justify="right")
    table.add_column("USD Value", justify="right")
    table.add_column("Priority", justify="right")
    for balance in balances:
        table.add_row(
            balance.currency,
            balance.chain,
            balance.formatted_amount,
            f"{balance.usd_value:,.2f}",
            str(balance.priority),
        )
    Console().print(table)


@app.command(name="normalize")
def normalize_cmd(
    balances_file: Path = typer.Argument(..., help="Balance snapshot (.json or .csv)"),
    prices_file: Path | None = typer.Option(None, "--prices", "-p", help="Local copy of the price feed (JSON)"),
    fetch: bool = typer.Option(False, "--fetch", help="Fetch prices from the configured price feed"),
    priorities_file: Path | None = typer.Option(
        None,
        "--priorities",
        help="JSON object mapping chain to priority (defaults to the built-in table)",
    ),
    output_format: str = typer.Option("table", "--format", "-f", help="Output format: table, json, text"),
) -> None:
    """Filter, order and value the balances in a snapshot file."""
    from wallet.engines.normalizer import normalize
    from wallet.ingestion import get_adapter
    from wallet.reports import WalletReportGenerator

    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Error: Invalid format '{output_format}'. Valid: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(1)

    try:
        adapter = get_adapter(balances_file)
        records = adapter.parse(balances_file)
        priorities = _load_priorities(priorities_file)
        prices = _load_prices(prices_file, fetch)
        result = normalize(records, prices, priorities)
    except (WalletError, FileNotFoundError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    for warning in adapter.validate(records, priorities):
        typer.echo(f"Warning: {warning}", err=True)

    if output_format == "json":
        payload = [{"key": b.key, **b.model_dump(mode="json")} for b in result]
        typer.echo(json.dumps(payload, indent=2))
    elif output_format == "text":
        typer.echo(WalletReportGenerator().render(result), nl=False)
    else:
        _print_balance_table(result)


@app.command()
def prices(
    url: str | None = typer.Option(None, "--url", help="Override the configured price feed URL"),
) -> None:
    """Fetch the price feed and print one price per currency."""
    from wallet.config import get_settings
    from wallet.prices import PriceFetcher

    settings = get_settings()
    if url:
        settings = settings.model_copy(update={"prices_url": url})
    fetcher = PriceFetcher.from_settings(settings)
    try:
        table = asyncio.run(fetcher.fetch())
    except WalletError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    for currency in sorted(table):
        typer.echo(f"{currency:<10} {table[currency]}")


@app.command()
def quote(
    from_symbol: str = typer.Argument(..., help="Token to sell"),
    to_symbol: str = typer.Argument(..., help="Token to buy"),
    amount: str = typer.Argument(..., help="Amount of the token to sell"),
    prices_file: Path | None = typer.Option(None, "--prices", "-p", help="Local copy of the price feed (JSON)"),
    fetch: bool = typer.Option(False, "--fetch", help="Fetch prices from the configured price feed"),
) -> None:
    """Quote a swap between two catalog tokens."""
    from wallet.engines.swap import quote_swap

    try:
        table = _load_prices(prices_file, fetch)
        result = quote_swap(from_symbol, to_symbol, amount, table)
    except (WalletError, FileNotFoundError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    if not result.is_priced:
        typer.echo(f"Warning: no price for {result.from_symbol} or {result.to_symbol}; rate is 0.", err=True)
    typer.echo(f"1 {result.from_symbol} = {result.rate:.6f} {result.to_symbol}")
    typer.echo(
        f"{result.from_amount} {result.from_symbol} (${result.from_usd_value}) -> "
        f"{result.to_amount} {result.to_symbol} (${result.to_usd_value})"
    )


@app.command()
def tokens(
    search: str = typer.Argument("", help="Filter by name or symbol"),
) -> None:
    """List the swap token catalog."""
    from wallet.engines.swap import DEFAULT_TOKENS, search_tokens

    matches = search_tokens(DEFAULT_TOKENS, search)
    if not matches:
        typer.echo(f"No tokens match '{search}'")
        raise typer.Exit(0)
    for token in matches:
        typer.echo(f"{token.symbol:<6} {token.name}")


@app.command(name="sum-to-n")
def sum_to_n(
    n: int = typer.Argument(..., help="Upper bound of the sum"),
    method: str = typer.Option("a", "--method", "-m", help="Implementation: a (for loop), b (while loop), c (reduce)"),
) -> None:
    """Sum the integers from 1 to n."""
    from wallet.engines.summation import SUM_METHODS

    func = SUM_METHODS.get(method.lower())
    if func is None:
        typer.echo(f"Error: Invalid method '{method}'. Valid: {', '.join(SUM_METHODS)}", err=True)
        raise typer.Exit(1)
    typer.echo(str(func(n)))
