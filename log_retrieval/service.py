"""Query façade used by the HTTP layer and the CLI."""

import logging
from datetime import date
from typing import Callable, Optional, Union

from log_retrieval.aggregator import (
    available_log_files,
    date_from_log_file,
    log_file_path,
    scan_date,
    scan_files,
    sort_by_timestamp,
    trailing_dates,
)
from log_retrieval.config import Config
from log_retrieval.filters import build_filter_chain
from log_retrieval.parser import LogRecord
from log_retrieval.reader import CORRELATION_OPTIONS, DATE_OPTIONS, SEARCH_OPTIONS
from log_retrieval.validation import parse_date

logger = logging.getLogger(__name__)

CORRELATION_WINDOW_DAYS = 3
SEARCH_WINDOW_DAYS = 7

DateLike = Union[date, str]


def _as_date(value: DateLike) -> date:
    if isinstance(value, date):
        return value
    return parse_date(value)


class LogQueryService:
    """Answers log queries against one directory of daily log files.

    Each call owns its own accumulator and options, so one service instance
    can be shared between concurrent requests.
    """

    def __init__(self, config: Config, today: Callable[[], date] = date.today):
        self._config = config
        self._today = today

    @property
    def log_dir(self) -> str:
        return self._config.log_dir

    def today(self) -> date:
        return self._today()

    def get_by_date(self, day: DateLike, level: Optional[str] = None) -> tuple[list[LogRecord], int]:
        """Every record in the file for day, in file order.

        Raises NotFoundError when there is no file for day and ReadError when
        it cannot be read.
        """
        predicate = build_filter_chain(level=level)
        result = scan_date(self.log_dir, _as_date(day), predicate, DATE_OPTIONS)
        logger.debug("Date query %s matched %d record(s), skipped %d line(s)",
                     day, result.total, result.skipped_lines)
        return result.records, result.total

    def get_by_correlation_id(self, log_id: str) -> list[LogRecord]:
        """All records for log_id over the last 3 days, oldest first."""
        days = trailing_dates(CORRELATION_WINDOW_DAYS, self.today())
        paths = [log_file_path(self.log_dir, d) for d in days]
        predicate = build_filter_chain(log_id=log_id)

        result = scan_files(paths, predicate, CORRELATION_OPTIONS)
        logger.debug("Correlation query %s matched %d record(s) across %d file(s)",
                     log_id, result.total, result.files_scanned)
        return sort_by_timestamp(result.records)

    def search(
        self,
        query: str,
        day: Optional[DateLike] = None,
        level: Optional[str] = None,
    ) -> tuple[list[LogRecord], int]:
        """Case-insensitive search over message, path and log id, newest first.

        Searches the file for day when given, otherwise the last 7 days.
        Missing or unreadable files are skipped.
        """
        if day is not None:
            days = [_as_date(day)]
        else:
            days = list(reversed(trailing_dates(SEARCH_WINDOW_DAYS, self.today())))
        paths = [log_file_path(self.log_dir, d) for d in days]
        predicate = build_filter_chain(query=query, level=level)

        result = scan_files(paths, predicate, SEARCH_OPTIONS)
        records = sort_by_timestamp(result.records, newest_first=True)
        logger.debug("Search %r matched %d record(s) across %d file(s)",
                     query, len(records), result.files_scanned)
        return records, len(records)

    def available_dates(self) -> list[str]:
        """Dates that have a log file, newest first."""
        return [date_from_log_file(path) for path in available_log_files(self.log_dir)]
