"""JSON file sink for exporting plans and comparisons."""

import json
import logging
from dataclasses import is_dataclass
from pathlib import Path
from typing import Any

from debt_planner.sinks.serialization import to_dict, to_dict_fast

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Output results to JSON files."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_result(self, name: str, result: Any) -> Path:
        """Write one result object (plan, comparison, DTI) to ``<name>.json``."""
        file_path = self.output_dir / f"{name}.json"
        self._dump(file_path, to_dict(result))
        self._counts[name] = 1
        return file_path

    def write_batch(self, name: str, records: list[Any]) -> Path:
        """Write a list of flat rows (period records, timeline entries)."""
        file_path = self.output_dir / f"{name}.json"
        self._dump(file_path, [self._row(record) for record in records])
        self._counts[name] = len(records)
        return file_path

    def close(self) -> None:
        """Log a summary of what was written."""
        logger.info("JSON files written to: %s", self.output_dir)
        for name, count in self._counts.items():
            logger.info("  %s: %d records", name, count)

    def _dump(self, file_path: Path, data: Any) -> None:
        with open(file_path, "w", encoding="utf-8") as f:
            if self.pretty:
                json.dump(data, f, indent=2, ensure_ascii=False, default=str)
            else:
                json.dump(data, f, ensure_ascii=False, default=str)

    @staticmethod
    def _row(record: Any) -> dict:
        if is_dataclass(record):
            return to_dict_fast(record)
        return to_dict(record)
