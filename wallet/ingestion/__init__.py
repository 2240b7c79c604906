"""Balance source adapters."""

from pathlib import Path

from wallet.ingestion.base import BaseAdapter
from wallet.ingestion.csv_file import CSVAdapter
from wallet.ingestion.json_file import JSONAdapter

ADAPTERS: dict[str, type[BaseAdapter]] = {
    ".json": JSONAdapter,
    ".csv": CSVAdapter,
}


def get_adapter(file_path: Path) -> BaseAdapter:
    """Pick an adapter from the file extension."""
    suffix = file_path.suffix.lower()
    if suffix not in ADAPTERS:
        supported = ", ".join(sorted(ADAPTERS))
        raise ValueError(f"Unsupported balance file type '{suffix}'. Supported: {supported}")
    return ADAPTERS[suffix]()


__all__ = ["ADAPTERS", "BaseAdapter", "CSVAdapter", "JSONAdapter", "get_adapter"]
