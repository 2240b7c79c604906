"""Balance normalizer: priority lookup, filtering, ordering and enrichment."""

import logging
from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from functools import cmp_to_key
from typing import Any

from pydantic import ValidationError

from wallet.engines.priorities import MIN_PRIORITY
from wallet.exceptions import InvalidInputError
from wallet.models.balances import BalanceRecord, EnrichedBalance

logger = logging.getLogger(__name__)

PriceTable = Mapping[str, Decimal]
PriorityTable = Mapping[str, int]

TWO_PLACES = Decimal("0.01")


def resolve_priority(chain: str, priorities: PriorityTable) -> int:
    """Return the configured priority for a chain, or MIN_PRIORITY if unlisted."""
    priority = priorities.get(chain, MIN_PRIORITY)
    if isinstance(priority, bool) or not isinstance(priority, int):
        raise InvalidInputError(f"priorities[{chain}]", f"expected an integer, got {priority!r}")
    return priority


def resolve_price(currency: str, prices: PriceTable | None) -> Decimal:
    """Return the unit price for a currency; unpriced currencies are worth 0."""
    if not prices:
        return Decimal("0")
    raw = prices.get(currency)
    if raw is None:
        return Decimal("0")
    if isinstance(raw, bool):
        raise InvalidInputError(f"prices[{currency}]", f"expected a number, got {raw!r}")
    try:
        price = raw if isinstance(raw, Decimal) else Decimal(str(raw))
    except InvalidOperation:
        raise InvalidInputError(f"prices[{currency}]", f"expected a number, got {raw!r}") from None
    if not price.is_finite() or price < 0:
        raise InvalidInputError(f"prices[{currency}]", f"price must be a non-negative number, got {raw!r}")
    return price


def format_amount(amount: Decimal) -> str:
    """Render an amount with exactly two decimal places, rounding half up."""
    with localcontext() as ctx:
        # integer digits plus two places plus one guard digit
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        return format(amount.quantize(TWO_PLACES, rounding=ROUND_HALF_UP), "f")


def usd_value(amount: Decimal, price: Decimal) -> Decimal:
    """Exact product of amount and unit price, whatever the operand sizes."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(amount.as_tuple().digits) + len(price.as_tuple().digits))
        return amount * price


def compare_priority(lhs: EnrichedBalance, rhs: EnrichedBalance) -> int:
    """Three-way comparator ordering balances by descending priority."""
    if lhs.priority > rhs.priority:
        return -1
    if lhs.priority < rhs.priority:
        return 1
    return 0


def _coerce_record(record: Any, index: int) -> BalanceRecord:
    if isinstance(record, BalanceRecord):
        return record
    if not isinstance(record, Mapping):
        raise InvalidInputError(f"records[{index}]", f"expected a balance record, got {type(record).__name__}")
    try:
        return BalanceRecord.model_validate(dict(record))
    except ValidationError as exc:
        error = exc.errors()[0]
        loc = ".".join(str(part) for part in error["loc"]) or "record"
        raise InvalidInputError(f"records[{index}].{loc}", error["msg"]) from exc


def normalize(
    records: Iterable[BalanceRecord | Mapping[str, Any]],
    prices: PriceTable | None,
    priorities: PriorityTable,
) -> list[EnrichedBalance]:
    """Turn raw balances into an ordered, display-ready list.

    Keeps only strictly positive amounts, orders them by descending chain
    priority (ties keep their input order) and attaches the resolved
    priority, a two-place formatted amount and the USD value.

    Args:
        records: Balance snapshot; plain mappings are validated into records.
        prices: Unit price per currency. None means the table is not loaded
            yet and every balance is valued at 0.
        priorities: Priority per chain; unlisted chains get MIN_PRIORITY.

    Raises:
        InvalidInputError: A record or table entry is malformed.
    """
    coerced = [_coerce_record(record, index) for index, record in enumerate(records)]

    enriched: list[EnrichedBalance] = []
    for record in coerced:
        priority = resolve_priority(record.chain, priorities)
        if record.amount <= 0:
            continue
        enriched.append(
            EnrichedBalance(
                currency=record.currency,
                amount=record.amount,
                chain=record.chain,
                priority=priority,
                formatted_amount=format_amount(record.amount),
                usd_value=usd_value(record.amount, resolve_price(record.currency, prices)),
            )
        )

    ordered = sorted(enriched, key=cmp_to_key(compare_priority))
    logger.debug("Normalized %d of %d balances", len(ordered), len(coerced))
    return ordered
