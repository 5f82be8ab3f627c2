"""Export stage tables for spreadsheets.

One sheet (or CSV file) per stage, rows written as-is.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from decompcast.core.results import DecompositionResult

logger = logging.getLogger(__name__)


def _file_stem(sheet_name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", sheet_name.lower()).strip("_")


def export_workbook(result: DecompositionResult, path: str | Path) -> Path:
    """Write the four stage tables to an .xlsx workbook, one sheet each.

    Requires openpyxl.
    """
    import pandas as pd

    path = Path(path)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        for sheet_name, table in result.tables().items():
            table.to_excel(writer, sheet_name=sheet_name, index=False)
    logger.info("Workbook saved: %s", path)
    return path


def export_csv(result: DecompositionResult, directory: str | Path) -> list[Path]:
    """Write each stage table to ``<directory>/<sheet>.csv``."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    written = []
    for sheet_name, table in result.tables().items():
        target = directory / f"{_file_stem(sheet_name)}.csv"
        table.to_csv(target, index=False)
        written.append(target)
    logger.info("Saved %d tables to %s", len(written), directory)
    return written


__all__ = ["export_workbook", "export_csv"]
