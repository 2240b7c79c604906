"""Tests for balance models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from wallet.models.balances import BalanceRecord, EnrichedBalance


class TestBalanceRecord:
    def test_amount_parsed_as_decimal(self):
        record = BalanceRecord(currency="ETH", amount="2.30", chain="Ethereum")
        assert record.amount == Decimal("2.30")

    def test_negative_amount_allowed(self):
        record = BalanceRecord(currency="DOGE", amount="-10", chain="Dogecoin")
        assert record.amount < 0

    def test_non_numeric_amount_rejected(self):
        with pytest.raises(ValidationError):
            BalanceRecord(currency="ETH", amount="two", chain="Ethereum")

    def test_infinite_amount_rejected(self):
        with pytest.raises(ValidationError):
            BalanceRecord(currency="ETH", amount=Decimal("Infinity"), chain="Ethereum")

    def test_frozen(self):
        record = BalanceRecord(currency="ETH", amount="1", chain="Ethereum")
        with pytest.raises(ValidationError):
            record.amount = Decimal("2")


class TestEnrichedBalance:
    def test_key_uses_chain_and_currency(self):
        balance = EnrichedBalance(
            currency="USDT",
            amount=Decimal("1"),
            chain="Ethereum",
            priority=50,
            formatted_amount="1.00",
            usd_value=Decimal("1"),
        )
        assert balance.key == "Ethereum-USDT"
