"""Configuration loading from an optional YAML file and environment variables."""

import logging
import os
from dataclasses import dataclass, fields

import yaml

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Config:
    log_dir: str = "./logs"
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    debug: bool = False

    def __post_init__(self):
        if not self.log_dir or not self.log_dir.strip():
            raise ValueError("log_dir must not be empty")
        if not 1 <= self.port <= 65535:
            raise ValueError(f"port must be between 1 and 65535, got {self.port}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        object.__setattr__(self, "log_level", self.log_level.upper())

    @classmethod
    def from_dict(cls, d: dict) -> "Config":
        known = {f.name for f in fields(cls)}
        unknown = set(d) - known
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(sorted(unknown)))
        values = {k: v for k, v in d.items() if k in known}
        if "port" in values:
            values["port"] = int(values["port"])
        if "debug" in values:
            values["debug"] = _parse_bool(values["debug"])
        return cls(**values)


def load_yaml_config(path: str | None) -> dict:
    """Load the YAML config file. Returns empty dict if there is none."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    logger.info("Loaded YAML config from %s", path)
    return data


def load_config(path: str | None = None) -> Config:
    """Build Config from defaults, then the YAML file, then env vars.

    An explicit path wins; otherwise the ``CONFIG_PATH`` environment variable
    names the YAML file.
    """
    if path is None:
        path = os.environ.get("CONFIG_PATH")
    values = load_yaml_config(path)

    env_map = {
        "LOG_DIR": "log_dir",
        "SERVER_HOST": "host",
        "SERVER_PORT": "port",
        "LOG_LEVEL": "log_level",
        "DEBUG": "debug",
    }
    for env_key, field_name in env_map.items():
        if env_key in os.environ:
            values[field_name] = os.environ[env_key]

    return Config.from_dict(values)
