"""Record loading from the event CSV file."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import List

from ..config import EVENTS_CSV_PATH
from ..errors import DataUnavailable
from ..models.event import EventRecord

logger = logging.getLogger(__name__)


def load_records(path: str | Path | None = None) -> List[EventRecord]:
    """Read every row of the CSV file at *path* into :class:`EventRecord` objects.

    The file is read in full on every call; there is no cache.

    Raises
    ------
    DataUnavailable
        If the file is missing, cannot be decoded, has no header row or the
        csv module rejects its contents.
    """
    csv_path = Path(path or EVENTS_CSV_PATH)
    logger.info("Loading event records from %s", csv_path)

    try:
        with csv_path.open("r", encoding="utf-8-sig", newline="") as handle:
            reader = csv.DictReader(handle)
            if not reader.fieldnames:
                raise DataUnavailable(f"Event file {csv_path} has no header row")
            records = [EventRecord.from_row(row) for row in reader]
    except DataUnavailable:
        raise
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        logger.error("Failed to read event file %s: %s", csv_path, exc)
        raise DataUnavailable(f"Could not read event file {csv_path}: {exc}") from exc

    logger.info("Loaded %d event records", len(records))
    return records

__all__ = ["load_records"]
