"""Tests for price table construction."""

import json
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from pathlib import Path

import pytest

from wallet.exceptions import InvalidInputError
from wallet.prices.table import build_price_table, load_price_file, parse_price_entries


class TestParsePriceEntries:
    def test_parse(self, price_feed):
        entries = parse_price_entries(price_feed)
        assert len(entries) == 5
        assert entries[0].price == Decimal("0.004039")

    def test_rejects_non_list(self):
        with pytest.raises(InvalidInputError):
            parse_price_entries({"ETH": 1})

    def test_rejects_negative_price(self):
        with pytest.raises(InvalidInputError, match=r"prices\[0\]\.price"):
            parse_price_entries([{"currency": "ETH", "price": "-1"}])


class TestBuildPriceTable:
    def test_latest_entry_wins(self, price_feed):
        table = build_price_table(parse_price_entries(price_feed))
        assert table["USDC"] == Decimal("1.0")
        assert set(table) == {"SWTH", "ETH", "USDC", "BTC"}

    def test_earlier_entry_listed_last_does_not_win(self):
        entries = parse_price_entries([
            {"currency": "ETH", "date": "2023-08-29T08:00:00Z", "price": "2"},
            {"currency": "ETH", "date": "2023-08-29T07:00:00Z", "price": "1"},
        ])
        assert build_price_table(entries)["ETH"] == Decimal("2")

    def test_undated_entries(self):
        entries = parse_price_entries([
            {"currency": "ETH", "price": "1"},
            {"currency": "ETH", "price": "2"},
            {"currency": "BTC", "date": "2023-08-29T07:00:00Z", "price": "3"},
            {"currency": "BTC", "price": "4"},
        ])
        table = build_price_table(entries)
        assert table["ETH"] == Decimal("2")
        assert table["BTC"] == Decimal("3")

    def test_stale_entries_dropped(self, price_feed):
        as_of = datetime(2023, 9, 1, tzinfo=UTC)
        table = build_price_table(parse_price_entries(price_feed), as_of=as_of, max_age=timedelta(days=1))
        assert table == {}

    def test_fresh_entries_kept(self, price_feed):
        as_of = datetime(2023, 8, 29, 12, 0, tzinfo=UTC)
        table = build_price_table(parse_price_entries(price_feed), as_of=as_of, max_age=timedelta(days=1))
        assert len(table) == 4

    def test_naive_as_of_treated_as_utc(self, price_feed):
        table = build_price_table(
            parse_price_entries(price_feed),
            as_of=datetime(2023, 8, 29, 12, 0),
            max_age=timedelta(hours=1),
        )
        assert table == {}


class TestLoadPriceFile:
    def test_feed_format(self, tmp_path: Path, price_feed):
        path = tmp_path / "prices.json"
        path.write_text(json.dumps(price_feed))
        assert load_price_file(path)["BTC"] == Decimal("26002.82202020202")

    def test_flat_object(self, tmp_path: Path):
        path = tmp_path / "prices.json"
        path.write_text(json.dumps({"SWTH": "0.1", "ETH": 3000}))
        assert load_price_file(path) == {"SWTH": Decimal("0.1"), "ETH": Decimal("3000")}

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "prices.json"
        path.write_text("not json")
        with pytest.raises(InvalidInputError):
            load_price_file(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_price_file(tmp_path / "missing.json")
