"""Collects filtered records across chunks and files, enforcing a result cap."""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from log_retrieval.filters import Predicate
from log_retrieval.parser import LogRecord


@dataclass
class ScanResult:
    records: list[LogRecord] = field(default_factory=list)
    skipped_lines: int = 0
    dropped_records: int = 0
    files_scanned: int = 0
    peak_retained: int = 0

    @property
    def total(self) -> int:
        return len(self.records)


class ResultAccumulator:
    """Retains matching records in discovery order.

    Records with an empty timestamp are dropped before the predicate sees
    them. A predicate of None keeps everything. With a positive max_results
    the retained list is trimmed to the cap after every batch, so at most
    one batch beyond the cap is ever held.
    """

    def __init__(self, predicate: Optional[Predicate] = None, max_results: int = 0):
        self._predicate = predicate
        self._max_results = max_results
        self._records: list[LogRecord] = []
        self.skipped_lines = 0
        self.dropped_records = 0
        self.files_scanned = 0
        self.peak_retained = 0

    def add_batch(self, records: Iterable[LogRecord]) -> None:
        for record in records:
            if not record.timestamp:
                self.dropped_records += 1
                continue
            if self._predicate is None or self._predicate(record):
                self._records.append(record)

        self.peak_retained = max(self.peak_retained, len(self._records))
        if self._max_results > 0 and len(self._records) > self._max_results:
            del self._records[self._max_results:]

    @property
    def cap_reached(self) -> bool:
        return self._max_results > 0 and len(self._records) >= self._max_results

    def __len__(self) -> int:
        return len(self._records)

    def mark(self) -> int:
        """Return a position that rollback() can restore."""
        return len(self._records)

    def rollback(self, mark: int) -> None:
        """Discard every record retained after mark."""
        del self._records[mark:]

    def result(self) -> ScanResult:
        return ScanResult(
            records=list(self._records),
            skipped_lines=self.skipped_lines,
            dropped_records=self.dropped_records,
            files_scanned=self.files_scanned,
            peak_retained=self.peak_retained,
        )
