"""Wallet balance report generator."""

from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from wallet.models.balances import EnrichedBalance
from wallet.models.reports import WalletReportLine

TEMPLATE_DIR = Path(__file__).parent / "templates"

CENTS = Decimal("0.01")


def _usd(value: Decimal) -> str:
    return f"{value.quantize(CENTS, rounding=ROUND_HALF_UP):,.2f}"


class WalletReportGenerator:
    """Generates a plain-text wallet report from normalized balances."""

    def __init__(self) -> None:
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def generate_lines(self, balances: list[EnrichedBalance]) -> list[WalletReportLine]:
        """Convert normalized balances to report lines, keeping their order."""
        return [
            WalletReportLine(
                key=balance.key,
                currency=balance.currency,
                chain=balance.chain,
                amount=balance.formatted_amount,
                usd_value=_usd(balance.usd_value),
                priority=balance.priority,
            )
            for balance in balances
        ]

    def render(self, balances: list[EnrichedBalance]) -> str:
        """Render the wallet report using the Jinja2 template."""
        total = sum((balance.usd_value for balance in balances), Decimal("0"))
        template = self.env.get_template("wallet.txt")
        return template.render(lines=self.generate_lines(balances), total=_usd(total))
