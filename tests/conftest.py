"""Shared test fixtures for the wallet toolkit."""

from decimal import Decimal

import pytest

from wallet.engines.priorities import DEFAULT_CHAIN_PRIORITIES
from wallet.models.balances import BalanceRecord


@pytest.fixture
def wallet_records() -> list[BalanceRecord]:
    return [
        BalanceRecord(currency="OSMO", amount=Decimal("100.5"), chain="Osmosis"),
        BalanceRecord(currency="ETH", amount=Decimal("2.3"), chain="Ethereum"),
        BalanceRecord(currency="ARB", amount=Decimal("50.0"), chain="Arbitrum"),
        BalanceRecord(currency="ZIL", amount=Decimal("1000.0"), chain="Zilliqa"),
        BalanceRecord(currency="NEO", amount=Decimal("25.5"), chain="Neo"),
        BalanceRecord(currency="BTC", amount=Decimal("0.1"), chain="Bitcoin"),
        BalanceRecord(currency="USDT", amount=Decimal("0"), chain="Ethereum"),
        BalanceRecord(currency="DOGE", amount=Decimal("-10.0"), chain="Dogecoin"),
    ]


@pytest.fixture
def wallet_prices() -> dict[str, Decimal]:
    return {
        "OSMO": Decimal("2.5"),
        "ETH": Decimal("3000"),
        "ARB": Decimal("1.2"),
        "ZIL": Decimal("0.02"),
        "NEO": Decimal("15.0"),
        "BTC": Decimal("45000"),
        "USDT": Decimal("1.0"),
        "DOGE": Decimal("0.08"),
    }


@pytest.fixture
def chain_priorities() -> dict[str, int]:
    return dict(DEFAULT_CHAIN_PRIORITIES)


@pytest.fixture
def price_feed() -> list[dict]:
    return [
        {"currency": "SWTH", "date": "2023-08-29T07:10:40.000Z", "price": "0.004039"},
        {"currency": "ETH", "date": "2023-08-29T07:10:52.000Z", "price": "1645.9337373737374"},
        {"currency": "USDC", "date": "2023-08-29T07:10:30.000Z", "price": "0.989832"},
        {"currency": "USDC", "date": "2023-08-29T07:10:40.000Z", "price": "1.0"},
        {"currency": "BTC", "date": "2023-08-29T07:10:40.000Z", "price": "26002.82202020202"},
    ]
