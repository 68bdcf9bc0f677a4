"""Log line parser — frozen dataclass + compiled regex enrichment."""

import json
import re
from dataclasses import asdict, dataclass

from log_retrieval.errors import ParseError

HTTP_PATTERN = re.compile(r"(GET|POST|PUT|DELETE|PATCH|HEAD|OPTIONS)\s+([^\s|]+)")
STATUS_PATTERN = re.compile(r"Status:\s*(\d+)")
DURATION_PATTERN = re.compile(r"Duration:\s*([^\s|]+)")
IP_PATTERN = re.compile(r"IP:\s*([^\s|]+)")
USER_AGENT_PATTERN = re.compile(r"User-Agent:\s*([^|\r\n]+)")

STRING_FIELDS = ("timestamp", "log_id", "level", "message", "file", "function")

# Always present in API output even when empty.
CORE_FIELDS = ("timestamp", "level", "message")


@dataclass(frozen=True)
class LogRecord:
    timestamp: str
    log_id: str = ""
    level: str = ""
    message: str = ""
    file: str = ""
    line: int = 0
    function: str = ""
    # Derived from the message, best effort.
    method: str = ""
    path: str = ""
    status: int = 0
    duration: str = ""
    ip: str = ""
    user_agent: str = ""

    def to_dict(self) -> dict:
        """JSON shape for API output; empty optional fields are omitted."""
        return {
            key: value
            for key, value in asdict(self).items()
            if key in CORE_FIELDS or value
        }


def enrich(message: str) -> dict:
    """Extract HTTP request details embedded in a free-text message.

    Each pattern is tried independently; a miss leaves that field out of the
    returned dict.
    """
    fields = {}

    match = HTTP_PATTERN.search(message)
    if match:
        fields["method"] = match.group(1)
        fields["path"] = match.group(2)

    match = STATUS_PATTERN.search(message)
    if match:
        try:
            fields["status"] = int(match.group(1))
        except ValueError:
            pass

    match = DURATION_PATTERN.search(message)
    if match:
        fields["duration"] = match.group(1)

    match = IP_PATTERN.search(message)
    if match:
        fields["ip"] = match.group(1)

    match = USER_AGENT_PATTERN.search(message)
    if match:
        fields["user_agent"] = match.group(1).strip()

    return fields


def parse_line(line: str) -> LogRecord:
    """Parse one JSON log line into a LogRecord. Raises ParseError."""
    try:
        data = json.loads(line)
    except (ValueError, RecursionError, TypeError) as exc:
        # deep nesting raises RecursionError, oversized ints a plain ValueError
        raise ParseError(str(exc), line) from exc

    if not isinstance(data, dict):
        raise ParseError("expected a JSON object", line)

    values = {}
    for key in STRING_FIELDS:
        value = data.get(key)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise ParseError(f"field {key!r} must be a string", line)
        values[key] = value

    line_no = data.get("line")
    if line_no is None:
        line_no = 0
    if isinstance(line_no, bool) or not isinstance(line_no, int):
        raise ParseError("field 'line' must be an integer", line)

    return LogRecord(line=line_no, **values, **enrich(values["message"]))
