"""Swap quoting: exchange rates between catalog tokens from a price table."""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from wallet.engines.normalizer import PriceTable, resolve_price
from wallet.exceptions import InvalidInputError, UnknownTokenError
from wallet.models.tokens import SwapQuote, Token

ICON_BASE_URL = "https://raw.githubusercontent.com/Switcheo/token-icons/main/tokens"

DEFAULT_TOKENS: list[Token] = [
    Token(symbol=symbol, name=name, icon=f"{ICON_BASE_URL}/{symbol}.svg")
    for symbol, name in (
        ("SWTH", "Switcheo"),
        ("ETH", "Ethereum"),
        ("BTC", "Bitcoin"),
        ("USDC", "USD Coin"),
        ("USDT", "Tether"),
        ("SOL", "Solana"),
        ("ADA", "Cardano"),
        ("DOT", "Polkadot"),
        ("LINK", "Chainlink"),
        ("UNI", "Uniswap"),
    )
]

SIX_PLACES = Decimal("0.000001")
TWO_PLACES = Decimal("0.01")


def search_tokens(tokens: Sequence[Token], term: str = "") -> list[Token]:
    """Case-insensitive substring match on token name or symbol."""
    needle = term.strip().lower()
    if not needle:
        return list(tokens)
    return [t for t in tokens if needle in t.name.lower() or needle in t.symbol.lower()]


def find_token(tokens: Sequence[Token], symbol: str) -> Token:
    wanted = symbol.strip().upper()
    for token in tokens:
        if token.symbol.upper() == wanted:
            return token
    raise UnknownTokenError(symbol)


def exchange_rate(from_symbol: str, to_symbol: str, prices: PriceTable | None) -> Decimal:
    """Units of the target token received per one unit of the source token.

    Returns 0 when either side has no usable price.
    """
    from_price = resolve_price(from_symbol, prices)
    to_price = resolve_price(to_symbol, prices)
    if from_price == 0 or to_price == 0:
        return Decimal("0")
    return from_price / to_price


def _parse_amount(raw: Decimal | int | str) -> Decimal:
    if isinstance(raw, bool):
        raise InvalidInputError("from_amount", f"expected a number, got {raw!r}")
    try:
        amount = raw if isinstance(raw, Decimal) else Decimal(str(raw))
    except InvalidOperation:
        raise InvalidInputError("from_amount", f"expected a number, got {raw!r}") from None
    if not amount.is_finite() or amount <= 0:
        raise InvalidInputError("from_amount", "amount must be positive")
    return amount


def quote_swap(
    from_symbol: str,
    to_symbol: str,
    from_amount: Decimal | int | str,
    prices: PriceTable | None,
    tokens: Sequence[Token] = DEFAULT_TOKENS,
) -> SwapQuote:
    """Price a swap of `from_amount` units of one catalog token into another."""
    source = find_token(tokens, from_symbol)
    target = find_token(tokens, to_symbol)
    amount = _parse_amount(from_amount)

    rate = exchange_rate(source.symbol, target.symbol, prices)
    to_amount = (amount * rate).quantize(SIX_PLACES, rounding=ROUND_HALF_UP)

    return SwapQuote(
        from_symbol=source.symbol,
        to_symbol=target.symbol,
        from_amount=amount,
        to_amount=to_amount,
        rate=rate,
        from_usd_value=(amount * resolve_price(source.symbol, prices)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP),
        to_usd_value=(to_amount * resolve_price(target.symbol, prices)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP),
    )
