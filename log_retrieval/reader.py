"""Chunked, bounded-memory reading of NDJSON log files."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from log_retrieval.accumulator import ResultAccumulator, ScanResult
from log_retrieval.errors import NotFoundError, ParseError, ReadError
from log_retrieval.filters import Predicate
from log_retrieval.parser import LogRecord, parse_line

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1000
READ_BUFFER_BYTES = 1024 * 1024  # 1 MiB


@dataclass(frozen=True)
class ReadOptions:
    max_results: int = 0  # 0 = unbounded
    chunk_size: int = 0  # <= 0 uses DEFAULT_CHUNK_SIZE
    early_termination: bool = False

    def __post_init__(self):
        if self.max_results < 0:
            raise ValueError("max_results must be >= 0")

    @property
    def resolved_chunk_size(self) -> int:
        return self.chunk_size if self.chunk_size > 0 else DEFAULT_CHUNK_SIZE

    @property
    def terminates_early(self) -> bool:
        return self.early_termination and self.max_results > 0


CORRELATION_OPTIONS = ReadOptions(max_results=1000, chunk_size=500, early_termination=True)
DATE_OPTIONS = ReadOptions(max_results=0, chunk_size=1000, early_termination=False)
SEARCH_OPTIONS = ReadOptions(max_results=5000, chunk_size=800, early_termination=True)


def parse_chunk(lines: list[str]) -> tuple[list[LogRecord], int]:
    """Parse a batch of lines. Returns (records, skipped_count)."""
    records = []
    skipped = 0
    for line in lines:
        try:
            records.append(parse_line(line))
        except ParseError:
            skipped += 1
    return records, skipped


def scan_file(
    path: str,
    predicate: Optional[Predicate] = None,
    options: ReadOptions = ReadOptions(),
    accumulator: Optional[ResultAccumulator] = None,
) -> ScanResult:
    """Stream path in chunks of non-blank lines and collect matching records.

    Pass an accumulator to share one result set (and one cap) across several
    files; predicate and options.max_results are then taken from it.

    Raises NotFoundError if the file does not exist and ReadError for any
    other open or read failure.
    """
    if not os.path.exists(path):
        raise NotFoundError(path)

    if accumulator is None:
        accumulator = ResultAccumulator(predicate, options.max_results)

    chunk_size = options.resolved_chunk_size
    skipped_before = accumulator.skipped_lines
    chunk: list[str] = []
    stopped_early = False

    try:
        with open(
            path, "r", encoding="utf-8", errors="replace", buffering=READ_BUFFER_BYTES
        ) as f:
            for raw in f:
                line = raw.strip()
                if not line:
                    continue
                chunk.append(line)
                if len(chunk) < chunk_size:
                    continue

                _flush(chunk, accumulator)
                chunk = []
                if options.terminates_early and accumulator.cap_reached:
                    stopped_early = True
                    break
    except OSError as exc:
        raise ReadError(path, str(exc)) from exc

    if chunk:
        _flush(chunk, accumulator)

    accumulator.files_scanned += 1
    skipped = accumulator.skipped_lines - skipped_before
    if skipped:
        logger.debug("Skipped %d malformed line(s) in %s", skipped, path)
    if stopped_early:
        logger.debug("Stopped reading %s after reaching %d result(s)",
                     path, options.max_results)

    return accumulator.result()


def _flush(chunk: list[str], accumulator: ResultAccumulator) -> None:
    records, skipped = parse_chunk(chunk)
    accumulator.skipped_lines += skipped
    accumulator.add_batch(records)
