"""Bulk-load recipient emails from a directory of CSV files (full replace)."""

from __future__ import annotations
import logging
import sqlite3
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import List

import pandas as pd

from .store import RecipientStore

LOGGER = logging.getLogger(__name__)

EMAIL_COLUMN = "email"


@dataclass
class FileReport:
    path: str
    rows: int = 0
    upserted: int = 0
    failed: int = 0


@dataclass
class IngestReport:
    files: int = 0
    rows: int = 0
    upserted: int = 0
    failed: int = 0

    def add(self, report: FileReport) -> None:
        self.files += 1
        self.rows += report.rows
        self.upserted += report.upserted
        self.failed += report.failed


def find_csv_files(directory: str | Path) -> List[Path]:
    """CSV files directly inside ``directory``. Raises if it cannot be read."""
    root = Path(directory)
    return sorted(p for p in root.iterdir() if p.is_file() and p.suffix.lower() == ".csv")


def _emails(chunk: pd.DataFrame):
    for raw in chunk[EMAIL_COLUMN]:
        if pd.isna(raw):
            continue
        email = str(raw).strip()
        if email:
            yield email


def load_csv_file(store: RecipientStore, path: Path, chunk_size: int = 500) -> FileReport:
    """Stream one CSV into the store in file order.

    Read and parse errors propagate; a failed upsert is logged and skipped.
    """
    report = FileReport(path=str(path))
    try:
        reader = pd.read_csv(
            path,
            encoding="utf-8",
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
            chunksize=chunk_size,
        )
    except pd.errors.EmptyDataError:
        LOGGER.warning(f"Skipping empty CSV file: {path}")
        return report

    with reader:
        for chunk in reader:
            chunk.columns = [str(c).strip() for c in chunk.columns]
            if EMAIL_COLUMN not in chunk.columns:
                LOGGER.debug(f"No '{EMAIL_COLUMN}' column in {path}; skipping")
                return report
            for email in _emails(chunk):
                report.rows += 1
                try:
                    if store.upsert_recipient(email):
                        report.upserted += 1
                except (sqlite3.Error, ValueError) as e:
                    report.failed += 1
                    LOGGER.error(f"Failed to upsert {email} from {path.name}: {e}")
    LOGGER.info(
        f"Loaded {path.name}: {report.rows} rows, {report.upserted} new, {report.failed} failed"
    )
    return report


def ingest(
    directory: str | Path,
    store: RecipientStore,
    max_workers: int | None = None,
    chunk_size: int | None = None,
) -> IngestReport:
    """Replace the recipient collection with the emails found in ``directory``.

    With no CSV files the store is left untouched. Otherwise it is cleared,
    then every file is streamed concurrently; this returns once all files are
    done and raises the first file-level error.
    """
    files = find_csv_files(directory)
    report = IngestReport()
    if not files:
        LOGGER.warning(f"No CSV files found in folder: {directory}")
        return report

    store.clear()
    size = chunk_size or store.config.chunk_size
    with ThreadPoolExecutor(max_workers=max_workers or min(8, len(files))) as pool:
        futures = [pool.submit(load_csv_file, store, path, size) for path in files]
        # result() re-raises a file's stream error; the pool still drains the rest
        for future in futures:
            report.add(future.result())

    LOGGER.info(
        f"Ingested {report.files} CSV files: {report.rows} rows, "
        f"{report.upserted} new recipients, {report.failed} failed upserts"
    )
    return report
