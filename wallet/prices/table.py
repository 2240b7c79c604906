"""Price table construction from raw price feed rows."""

import json
import logging
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from wallet.exceptions import InvalidInputError
from wallet.models.tokens import PriceEntry

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def parse_price_entries(payload: Any) -> list[PriceEntry]:
    """Validate a feed payload: a JSON array of {currency, price, date} objects."""
    if not isinstance(payload, list):
        raise InvalidInputError("prices", f"expected a list of price entries, got {type(payload).__name__}")
    entries: list[PriceEntry] = []
    for index, row in enumerate(payload):
        try:
            entries.append(PriceEntry.model_validate(row))
        except ValidationError as exc:
            error = exc.errors()[0]
            loc = ".".join(str(part) for part in error["loc"]) or "entry"
            raise InvalidInputError(f"prices[{index}].{loc}", error["msg"]) from exc
    return entries


def build_price_table(
    entries: list[PriceEntry],
    as_of: datetime | None = None,
    max_age: timedelta | None = None,
) -> dict[str, Decimal]:
    """Collapse feed rows into one price per currency.

    The most recent row per currency wins; later rows win ties and undated
    rows only replace other undated rows. When both `as_of` and `max_age`
    are given, dated rows older than `as_of - max_age` are dropped so the
    currency reads as unpriced.
    """
    latest: dict[str, PriceEntry] = {}
    for entry in entries:
        current = latest.get(entry.currency)
        if current is None or current.date is None:
            latest[entry.currency] = entry
        elif entry.date is not None and _as_utc(entry.date) >= _as_utc(current.date):
            latest[entry.currency] = entry

    cutoff = None
    if as_of is not None and max_age is not None:
        cutoff = _as_utc(as_of) - max_age

    table: dict[str, Decimal] = {}
    for currency, entry in latest.items():
        if cutoff is not None and entry.date is not None and _as_utc(entry.date) < cutoff:
            logger.info("Dropping stale price for %s (dated %s)", currency, entry.date.isoformat())
            continue
        table[currency] = entry.price
    return table


def load_price_file(
    file_path: Path,
    as_of: datetime | None = None,
    max_age: timedelta | None = None,
) -> dict[str, Decimal]:
    """Read a price table from a local copy of the price feed.

    Accepts the feed's array form or a flat {"CURRENCY": price} object.
    """
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    try:
        raw = json.loads(file_path.read_text())
    except json.JSONDecodeError as exc:
        raise InvalidInputError(str(file_path), f"invalid JSON: {exc}") from exc
    if isinstance(raw, dict):
        raw = [{"currency": currency, "price": price} for currency, price in raw.items()]
    return build_price_table(parse_price_entries(raw), as_of=as_of, max_age=max_age)
