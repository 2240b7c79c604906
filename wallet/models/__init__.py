"""Data models for the wallet toolkit."""

from wallet.models.balances import BalanceRecord, EnrichedBalance
from wallet.models.reports import WalletReportLine
from wallet.models.tokens import PriceEntry, SwapQuote, Token

__all__ = [
    "BalanceRecord",
    "EnrichedBalance",
    "PriceEntry",
    "SwapQuote",
    "Token",
    "WalletReportLine",
]
