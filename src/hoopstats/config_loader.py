"""Persist and load CLI profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from hoopstats.persistence import DEFAULT_DATA_FILE


@dataclass
class CliProfile:
    data_file: Path = Path(DEFAULT_DATA_FILE)
    points_per_mark: int = 2
    csv_directory: Optional[Path] = None

    @classmethod
    def load(cls, path: Path) -> "CliProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        csv_directory = data.get("csv_directory")
        return cls(
            data_file=Path(data.get("data_file", DEFAULT_DATA_FILE)),
            points_per_mark=int(data.get("points_per_mark", 2)),
            csv_directory=Path(csv_directory) if csv_directory else None,
        )

    def save(self, path: Path) -> None:
        payload = {
            "data_file": str(self.data_file),
            "points_per_mark": self.points_per_mark,
            "csv_directory": str(self.csv_directory) if self.csv_directory else None,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
