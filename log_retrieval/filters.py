"""Filter predicates for log records — correlation id, level, free-text query."""

from typing import Callable, Optional

from log_retrieval.parser import LogRecord

Predicate = Callable[[LogRecord], bool]


def filter_by_log_id(record: LogRecord, log_id: str) -> bool:
    """True if the record's correlation id equals log_id exactly."""
    return record.log_id == log_id


def filter_by_level(record: LogRecord, level: str) -> bool:
    """True if record matches the given level (case-insensitive)."""
    return record.level.lower() == level.lower()


def filter_by_query(record: LogRecord, query: str) -> bool:
    """True if query appears in the message, path, or log id (case-insensitive)."""
    needle = query.lower()
    return (
        needle in record.message.lower()
        or needle in record.path.lower()
        or needle in record.log_id.lower()
    )


def build_filter_chain(
    log_id: Optional[str] = None,
    level: Optional[str] = None,
    query: Optional[str] = None,
) -> Optional[Predicate]:
    """Combine the active filters into a single callable that ANDs them.

    Returns None when no filter is active, meaning "keep everything".
    """
    predicates = []

    if log_id:
        predicates.append(lambda record, i=log_id: filter_by_log_id(record, i))

    if query is not None:
        predicates.append(lambda record, q=query: filter_by_query(record, q))

    if level:
        predicates.append(lambda record, l=level: filter_by_level(record, l))

    if not predicates:
        return None

    def combined(record: LogRecord) -> bool:
        return all(p(record) for p in predicates)

    return combined
