"""JSON balance adapter."""

import json
from pathlib import Path

from wallet.exceptions import BalanceImportError
from wallet.ingestion.base import BaseAdapter
from wallet.models.balances import BalanceRecord


class JSONAdapter(BaseAdapter):
    """Reads a JSON array of balances, or an object with a "balances" array."""

    source = "JSON"

    def parse(self, file_path: Path) -> list[BalanceRecord]:
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        try:
            raw = json.loads(file_path.read_text())
        except json.JSONDecodeError as exc:
            raise BalanceImportError(f"JSON {file_path.name}", f"invalid JSON: {exc}") from exc

        if isinstance(raw, dict):
            raw = raw.get("balances")
        if not isinstance(raw, list):
            raise BalanceImportError(f"JSON {file_path.name}", "expected a list of balances")

        records = []
        for index, row in enumerate(raw):
            if not isinstance(row, dict):
                raise BalanceImportError(f"JSON {file_path.name}", f"row {index + 1}: expected an object")
            records.append(self._to_record(row, index, file_path))
        return records
