"""Format query results as text or JSON."""

import json

from log_retrieval.parser import LogRecord


def format_text(records: list[LogRecord]) -> str:
    lines = []
    for r in records:
        line = f"[{r.timestamp}] {r.level:7s} {r.log_id or '-':36s} {r.message}"
        if r.status:
            line += f" -> {r.status}"
        lines.append(line)
    return "\n".join(lines)


def format_json(records: list[LogRecord]) -> str:
    return json.dumps([r.to_dict() for r in records], indent=2)


def get_formatter(fmt: str):
    if fmt == "json":
        return format_json
    return format_text
