"""CSV balance adapter."""

import csv
from pathlib import Path

from wallet.exceptions import BalanceImportError
from wallet.ingestion.base import CHAIN_ALIASES, BaseAdapter
from wallet.models.balances import BalanceRecord


class CSVAdapter(BaseAdapter):
    """Reads balances from a CSV with currency, amount and chain columns."""

    source = "CSV"

    def parse(self, file_path: Path) -> list[BalanceRecord]:
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        with file_path.open(newline="", encoding="utf-8-sig") as f:
            reader = csv.DictReader(f)
            columns = {name.strip() for name in reader.fieldnames or []}
            missing = [name for name in ("currency", "amount") if name not in columns]
            if not columns.intersection(CHAIN_ALIASES):
                missing.append("chain")
            if missing:
                raise BalanceImportError(f"CSV {file_path.name}", f"missing columns: {', '.join(missing)}")

            records = []
            for index, row in enumerate(reader):
                cleaned = {key.strip(): (value or "").strip() for key, value in row.items() if key}
                records.append(self._to_record(cleaned, index, file_path))
        return records
