"""Balance record models: raw wallet input and its display-ready enrichment."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator


class BalanceRecord(BaseModel):
    """A single holding as reported by the balance source."""

    model_config = ConfigDict(frozen=True)

    currency: str
    amount: Decimal  # signed; zero or negative means no effective holding
    chain: str

    @field_validator("amount")
    @classmethod
    def _finite_amount(cls, value: Decimal) -> Decimal:
        if not value.is_finite():
            raise ValueError("amount must be a finite number")
        return value


class EnrichedBalance(BalanceRecord):
    """A positive balance with its resolved priority and derived display values."""

    priority: int
    formatted_amount: str
    usd_value: Decimal

    @property
    def key(self) -> str:
        """Stable presentation key; never the row position."""
        return f"{self.chain}-{self.currency}"
