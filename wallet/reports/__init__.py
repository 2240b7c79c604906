"""Report generation for wallet balances."""

from wallet.reports.wallet_report import WalletReportGenerator

__all__ = ["WalletReportGenerator"]
