"""Tests for the wallet report generator."""

from wallet.engines.normalizer import normalize
from wallet.reports.wallet_report import WalletReportGenerator


class TestWalletReport:
    def test_generate_lines(self, wallet_records, wallet_prices, chain_priorities):
        balances = normalize(wallet_records, wallet_prices, chain_priorities)
        lines = WalletReportGenerator().generate_lines(balances)
        assert [line.key for line in lines] == [
            "Osmosis-OSMO",
            "Ethereum-ETH",
            "Arbitrum-ARB",
            "Zilliqa-ZIL",
            "Neo-NEO",
            "Bitcoin-BTC",
        ]
        assert lines[1].usd_value == "6,900.00"
        assert lines[0].amount == "100.50"

    def test_render(self, wallet_records, wallet_prices, chain_priorities):
        balances = normalize(wallet_records, wallet_prices, chain_priorities)
        report = WalletReportGenerator().render(balances)
        assert report.startswith("WALLET BALANCES")
        assert "OSMO" in report
        assert "DOGE" not in report
        assert "Total USD value: 12,113.75" in report

    def test_render_empty(self):
        report = WalletReportGenerator().render([])
        assert "No positive balances." in report
        assert "Total USD value: 0.00" in report
