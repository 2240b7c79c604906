"""Wallet computation engines."""

from wallet.engines.cache import NormalizationCache
from wallet.engines.normalizer import compare_priority, normalize
from wallet.engines.priorities import DEFAULT_CHAIN_PRIORITIES, MIN_PRIORITY
from wallet.engines.swap import DEFAULT_TOKENS, exchange_rate, quote_swap, search_tokens
from wallet.engines.summation import sum_to_n_a, sum_to_n_b, sum_to_n_c

__all__ = [
    "DEFAULT_CHAIN_PRIORITIES",
    "DEFAULT_TOKENS",
    "MIN_PRIORITY",
    "NormalizationCache",
    "compare_priority",
    "exchange_rate",
    "normalize",
    "quote_swap",
    "search_tokens",
    "sum_to_n_a",
    "sum_to_n_b",
    "sum_to_n_c",
]
