"""Token catalog, price feed and swap quote models."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class Token(BaseModel):
    symbol: str
    name: str
    icon: str | None = None


class PriceEntry(BaseModel):
    """One row of the remote price feed."""

    currency: str
    price: Decimal = Field(ge=0)
    date: datetime | None = None


class SwapQuote(BaseModel):
    """Result of pricing a swap between two tokens."""

    from_symbol: str
    to_symbol: str
    from_amount: Decimal
    to_amount: Decimal
    rate: Decimal
    from_usd_value: Decimal
    to_usd_value: Decimal

    @property
    def is_priced(self) -> bool:
        return self.rate > 0
