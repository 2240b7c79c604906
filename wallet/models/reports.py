"""Report line models."""

from pydantic import BaseModel


class WalletReportLine(BaseModel):
    key: str
    currency: str
    chain: str
    amount: str
    usd_value: str
    priority: int
