"""Configuration for the catalog.

Settings come from environment variables, optionally seeded from a
``.env`` file in the working directory. Every value has a sensible
default so the catalog runs with no configuration at all.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_PATH = Path(__file__).resolve().parents[3] / "data"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class ConfigurationError(Exception):
    """Raised when a configuration value is present but invalid."""


@dataclass(frozen=True)
class StorageSettings:
    """Storage and runtime settings consumed by the document store."""

    data_path: Path = field(default_factory=lambda: DEFAULT_DATA_PATH)
    products_file: str = "products.json"
    enable_backup: bool = True
    max_backups: int = 10
    enable_locking: bool = True
    lock_timeout: float = 30.0
    environment: str = "production"

    @property
    def products_file_path(self) -> Path:
        return self.data_path / self.products_file

    @property
    def backup_path(self) -> Path:
        return self.data_path / "backups"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


def _env_bool(key: str, default: bool) -> bool:
    raw = os.environ.get(key)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(f"{key} must be a boolean, got {raw!r}")


def _env_number(key: str, default: float, cast: type) -> float:
    raw = os.environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw.strip())
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be a number, got {raw!r}") from exc
    if value < 0:
        raise ConfigurationError(f"{key} must not be negative, got {raw!r}")
    return value


def load_settings() -> StorageSettings:
    """Build settings from the environment (and ``.env`` if present)."""
    load_dotenv()

    data_path = os.environ.get("CATALOG_DATA_PATH")
    return StorageSettings(
        data_path=Path(data_path).expanduser() if data_path else DEFAULT_DATA_PATH,
        products_file=os.environ.get("CATALOG_PRODUCTS_FILE") or "products.json",
        enable_backup=_env_bool("CATALOG_ENABLE_BACKUP", True),
        max_backups=int(_env_number("CATALOG_MAX_BACKUPS", 10, int)),
        enable_locking=_env_bool("CATALOG_ENABLE_LOCKING", True),
        lock_timeout=_env_number("CATALOG_LOCK_TIMEOUT", 30.0, float),
        environment=(os.environ.get("CATALOG_ENV") or "production").strip().lower(),
    )
