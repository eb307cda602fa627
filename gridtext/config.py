from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel


class AppConfig(BaseModel):
    """Typed configuration loaded from YAML or a ``.env`` file."""

    LOG_LEVEL: str = "INFO"
    # Format used by ``Table.get_formatted_string`` when none is given
    DEFAULT_FORMAT: str = "ascii"
    EMPTY_TABLE_TEXT: str = "(no fields)"

    # CSV import -----------------------------------------------------
    CSV_SNIFF_BYTES: int = 4096
    CSV_FALLBACK_DELIMITER: str = ";"

    JSON_INDENT: int = 2


CONFIG_FILENAMES = ("gridtext.yaml", "gridtext.yml")


def _load_env(path: Path) -> Dict[str, Any]:
    """Parse simple KEY=VALUE lines from an .env file."""
    data: Dict[str, Any] = {}
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" in line:
            key, val = line.split("=", 1)
            data[key.strip()] = val.strip()
    return data


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load configuration from a YAML file."""
    with open(path, "r", encoding="utf-8") as f:
        content = yaml.safe_load(f)
    return content or {}


def _config_path() -> Path | None:
    config_path = os.environ.get("GRIDTEXT_CONFIG")
    if config_path:
        return Path(config_path)
    candidates = [Path.cwd() / name for name in CONFIG_FILENAMES]
    return next((p for p in candidates if p.exists()), None)


def load_config() -> AppConfig:
    """Load configuration from YAML or .env file."""
    path = _config_path()

    data: Dict[str, Any] = {}
    if path and path.exists():
        if path.suffix in {".yaml", ".yml"}:
            try:
                data = _load_yaml(path)
            except yaml.YAMLError:
                data = {}
        else:
            data = _load_env(path)
    if not isinstance(data, dict):
        data = {}

    cfg = {**AppConfig().model_dump(), **data}
    return AppConfig(**cfg)


def save_config(config: AppConfig, path: Path | None = None) -> None:
    """Persist configuration to a YAML file."""
    if path is None:
        env_path = os.environ.get("GRIDTEXT_CONFIG")
        path = Path(env_path) if env_path else Path.cwd() / CONFIG_FILENAMES[0]
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config.model_dump(), f)


CONFIG = load_config()
LOCK = threading.Lock()


def get(name: str, default: Any | None = None) -> Any:
    """Return configuration value for name with optional fallback.

    Reads are synchronized using ``LOCK`` so a concurrent :func:`reload`
    never exposes a half-built configuration.
    """
    with LOCK:
        return getattr(CONFIG, name, default)


def reload() -> None:
    """Reload configuration from disk into the global CONFIG object."""
    global CONFIG
    with LOCK:
        CONFIG = load_config()


def update(values: Dict[str, Any]) -> None:
    """Update known configuration keys in memory."""
    with LOCK:
        for key, val in values.items():
            if hasattr(CONFIG, key):
                setattr(CONFIG, key, val)
