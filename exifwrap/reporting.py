import csv
import logging
from pathlib import Path
from typing import Iterable, List

from .exceptions import ExifWrapError
from .models import MediaRecord
from . import config

class SummaryReport:
    """Flattens MediaRecords into one row of convenience values each."""

    def build_row(self, record: MediaRecord) -> List[str]:
        return [
            str(record.path),
            self._safe(record.get_camera),
            self._safe(record.get_lens),
            self._safe(lambda: record.get_date().isoformat()),
            "yes" if record.is_geotagged() else "no",
        ]

    def write_csv(self, records: Iterable[MediaRecord], out_path: Path) -> int:
        """
        Writes a CSV summary of `records` and returns the number of rows.
        Values a record does not carry are left empty.
        """
        count = 0
        with open(out_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(config.CSV_HEADERS)
            for record in records:
                writer.writerow(self.build_row(record))
                count += 1

        logging.info(f"Report complete. Wrote {count} rows to {out_path}")
        return count

    @staticmethod
    def _safe(getter) -> str:
        try:
            return getter()
        except ExifWrapError:
            return ""
