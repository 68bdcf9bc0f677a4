"""Resolve daily log files for a query and merge results across them."""

import logging
import os
import re
from datetime import date, timedelta
from typing import Iterable, Optional

from log_retrieval.accumulator import ResultAccumulator, ScanResult
from log_retrieval.errors import NotFoundError, ReadError
from log_retrieval.filters import Predicate
from log_retrieval.parser import LogRecord
from log_retrieval.reader import ReadOptions, scan_file

logger = logging.getLogger(__name__)

LOG_FILE_PREFIX = "app-"
LOG_FILE_EXTENSION = ".log"
LOG_FILE_PATTERN = re.compile(r"^app-(\d{4}-\d{2}-\d{2})\.log$")


def log_file_name(day: date) -> str:
    return f"{LOG_FILE_PREFIX}{day.isoformat()}{LOG_FILE_EXTENSION}"


def log_file_path(log_dir: str, day: date) -> str:
    return os.path.join(log_dir, log_file_name(day))


def trailing_dates(days: int, today: date) -> list[date]:
    """Return `days` calendar dates ending at today, oldest first."""
    return [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]


def scan_date(
    log_dir: str,
    day: date,
    predicate: Optional[Predicate],
    options: ReadOptions,
) -> ScanResult:
    """Scan the single file for day. NotFoundError and ReadError propagate."""
    return scan_file(log_file_path(log_dir, day), predicate, options)


def scan_files(
    paths: Iterable[str],
    predicate: Optional[Predicate],
    options: ReadOptions,
) -> ScanResult:
    """Scan several files into one result set, best effort.

    A missing file is skipped. A file that fails to read is skipped and any
    matches it contributed before failing are discarded. The cap applies to
    the combined result; once it is reached no further files are opened.
    """
    accumulator = ResultAccumulator(predicate, options.max_results)

    for path in paths:
        if accumulator.cap_reached:
            break

        mark = accumulator.mark()
        try:
            scan_file(path, options=options, accumulator=accumulator)
        except NotFoundError:
            logger.info("Log file not found, skipping: %s", path)
        except ReadError as exc:
            accumulator.rollback(mark)
            logger.warning("Error reading log file, skipping: %s (%s)", path, exc.reason)

    return accumulator.result()


def sort_by_timestamp(records: list[LogRecord], newest_first: bool = False) -> list[LogRecord]:
    """Stable sort on the raw timestamp string; ties keep discovery order."""
    return sorted(records, key=lambda r: r.timestamp, reverse=newest_first)


def available_log_files(log_dir: str) -> list[str]:
    """List daily log files in log_dir, newest first.

    Raises NotFoundError if the directory does not exist and ReadError if it
    cannot be listed.
    """
    if not os.path.isdir(log_dir):
        raise NotFoundError(log_dir)

    try:
        names = os.listdir(log_dir)
    except OSError as exc:
        raise ReadError(log_dir, str(exc)) from exc

    files = []
    for name in names:
        match = LOG_FILE_PATTERN.match(name)
        path = os.path.join(log_dir, name)
        if match and os.path.isfile(path):
            files.append((match.group(1), path))

    return [path for _, path in sorted(files, reverse=True)]


def date_from_log_file(path: str) -> str:
    """Extract the YYYY-MM-DD part of a daily log file name, or ''."""
    match = LOG_FILE_PATTERN.match(os.path.basename(path))
    return match.group(1) if match else ""
