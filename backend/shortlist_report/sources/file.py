"""
File data source - report inputs from a JSON or YAML export

Expected document:
    vacancies: [...]
    candidates: [...]
    raters: [...]        # or "users"
"""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from ..interfaces import DataLoadError, IReportDataSource
from ..models import ReportContext
from .selection import LOAD_FAILED_MESSAGE, ReportSelector


class FileReportDataSource(IReportDataSource):
    """Loads report inputs from a local export file"""

    def __init__(self, path: str | Path, selector: ReportSelector | None = None):
        self.path = Path(path)
        self.selector = selector or ReportSelector()

    def load(self, item_number: str) -> ReportContext:
        data = self._read()
        return self.selector.select(
            item_number,
            data.get("vacancies") or [],
            data.get("candidates") or [],
            data.get("raters") or data.get("users") or [],
        )

    def _read(self) -> dict:
        if not self.path.exists():
            raise DataLoadError(f"{LOAD_FAILED_MESSAGE} ({self.path} not found)")
        try:
            with open(self.path, encoding="utf-8") as f:
                if self.path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise DataLoadError(LOAD_FAILED_MESSAGE) from e

        if not isinstance(data, dict):
            raise DataLoadError(f"{LOAD_FAILED_MESSAGE} (expected a mapping in {self.path})")
        return data
