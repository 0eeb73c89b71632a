"""Job catalog read from a local Excel workbook (first worksheet)."""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from nextgen.log import get_logger
from nextgen.models import JOB_COLUMNS, JobRecord
from nextgen.sources.base import CatalogError, JobCatalogBase

log = get_logger(__name__)


class ExcelJobSource(JobCatalogBase):
    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read_rows(self) -> list[dict]:
        if not self.path.is_file():
            raise CatalogError(f"Could not load Excel file at {self.path}")
        try:
            df = pd.read_excel(self.path, sheet_name=0, dtype=object, engine="openpyxl")
        except Exception as exc:
            raise CatalogError(f"Could not read job catalog {self.path.name}: {exc}") from exc

        df.columns = [str(c).strip() for c in df.columns]
        missing = [c for c in JOB_COLUMNS if c not in df.columns]
        if missing:
            log.warning("Catalog %s lacks columns %s; treating them as blank", self.path.name, missing)
        return df.fillna("").to_dict(orient="records")

    def load(self) -> list[JobRecord]:
        jobs = [JobRecord.from_row(row) for row in self._read_rows()]
        log.info("Loaded %d jobs from %s", len(jobs), self.path.name)
        return jobs
