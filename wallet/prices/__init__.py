"""Price feed access and price table construction."""

from wallet.prices.fetcher import PriceFetcher, backoff_delay
from wallet.prices.table import build_price_table, load_price_file, parse_price_entries

__all__ = [
    "PriceFetcher",
    "backoff_delay",
    "build_price_table",
    "load_price_file",
    "parse_price_entries",
]
