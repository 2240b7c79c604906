"""Base adapter interface for balance ingestion."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from wallet.engines.normalizer import PriorityTable
from wallet.exceptions import BalanceImportError
from wallet.models.balances import BalanceRecord

CHAIN_ALIASES = ("chain", "blockchain")


class BaseAdapter(ABC):
    """Abstract base class for all balance file adapters."""

    source = "file"

    @abstractmethod
    def parse(self, file_path: Path) -> list[BalanceRecord]:
        """Parse a file and return a snapshot of balance records."""
        ...

    def validate(self, records: list[BalanceRecord], priorities: PriorityTable | None = None) -> list[str]:
        """Return warnings for records that will not show up as expected."""
        warnings: list[str] = []
        for index, record in enumerate(records):
            if record.amount <= 0:
                warnings.append(f"Row {index + 1}: {record.currency} on {record.chain} has non-positive amount {record.amount}")
            if priorities is not None and record.chain not in priorities:
                warnings.append(f"Row {index + 1}: chain '{record.chain}' has no priority entry")
        return warnings

    def _to_record(self, row: Mapping[str, Any], index: int, file_path: Path) -> BalanceRecord:
        data = dict(row)
        if "chain" not in data and "blockchain" in data:
            data["chain"] = data.pop("blockchain")
        try:
            return BalanceRecord.model_validate(data)
        except ValidationError as exc:
            error = exc.errors()[0]
            loc = ".".join(str(part) for part in error["loc"]) or "row"
            raise BalanceImportError(
                f"{self.source} {file_path.name}",
                f"row {index + 1}: {loc}: {error['msg']}",
            ) from exc
