"""Scheduler settings loaded from YAML with environment overrides."""
import os
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from leitner.errors import ConfigError

DEFAULT_CONFIG_PATH = str(Path.home() / ".leitner" / "config.yaml")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    log_level: str = "WARNING"
    strict_updates: bool = False
    validate_on_apply: bool = False


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("1", "true", "yes", "on"):
        return True
    if text in ("0", "false", "no", "off", ""):
        return False
    raise ConfigError(f"Not a boolean: {value!r}")


def read_config_file(config_path: str) -> dict:
    """Return the mapping in a YAML settings file, or {} if it doesn't exist."""
    path = Path(config_path)
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {path}, got {type(data).__name__}")
    return data


def load_settings(config_path: str = DEFAULT_CONFIG_PATH) -> Settings:
    """Load settings from file, then apply LEITNER_* environment overrides."""
    data = read_config_file(config_path)
    known = {f.name for f in fields(Settings)}
    unknown = set(data) - known
    if unknown:
        raise ConfigError(f"Unknown settings: {', '.join(sorted(unknown))}")

    if "LEITNER_LOG_LEVEL" in os.environ:
        data["log_level"] = os.environ["LEITNER_LOG_LEVEL"]
    if "LEITNER_STRICT_UPDATES" in os.environ:
        data["strict_updates"] = os.environ["LEITNER_STRICT_UPDATES"]
    if "LEITNER_VALIDATE_ON_APPLY" in os.environ:
        data["validate_on_apply"] = os.environ["LEITNER_VALIDATE_ON_APPLY"]

    level = str(data.get("log_level", Settings.log_level)).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Unknown log level: {level}")
    return Settings(
        log_level=level,
        strict_updates=_parse_bool(data.get("strict_updates", False)),
        validate_on_apply=_parse_bool(data.get("validate_on_apply", False)),
    )
