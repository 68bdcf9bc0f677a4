import json
import os
from datetime import date

import pytest

from log_retrieval.config import Config
from log_retrieval.service import LogQueryService

TODAY = date(2024, 1, 15)


def make_line(timestamp, log_id="req-1", level="INFO", message="ok", **extra):
    entry = {
        "timestamp": timestamp,
        "log_id": log_id,
        "level": level,
        "message": message,
        "file": "handler.go",
        "line": 42,
        "function": "Handle",
    }
    entry.update(extra)
    return json.dumps(entry)


def write_log(log_dir, name, lines):
    path = os.path.join(str(log_dir), name)
    with open(path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")
    return path


@pytest.fixture
def log_dir(tmp_path):
    d = tmp_path / "logs"
    d.mkdir()
    return d


@pytest.fixture
def config(log_dir):
    return Config(log_dir=str(log_dir))


@pytest.fixture
def service(config):
    return LogQueryService(config, today=lambda: TODAY)
