from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from sm_scaffold.errors import ConfigError

COMPOSER_FILE = "composer.json"
DEFAULT_VENDOR_DIR = "vendor"


def read_composer_config(project_dir: Path) -> dict[str, Any]:
    """Return the ``config`` section of the project's composer.json (empty if there is none)."""

    composer_path = project_dir / COMPOSER_FILE
    if not composer_path.exists():
        return {}

    try:
        data = json.loads(composer_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"cannot read {composer_path}: {type(exc).__name__}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{composer_path} must contain a JSON object")
    config = data.get("config") or {}
    if not isinstance(config, dict):
        raise ConfigError(f"{composer_path}: \"config\" must be an object")
    return config


def resolve_vendor_dir(project_dir: Path) -> Path:
    project_dir = project_dir.expanduser().resolve()

    vendor = os.getenv("COMPOSER_VENDOR_DIR")
    if not vendor:
        vendor = read_composer_config(project_dir).get("vendor-dir") or DEFAULT_VENDOR_DIR
    if not isinstance(vendor, str) or not vendor.strip():
        raise ConfigError(f"vendor-dir must be a non-empty string, got {vendor!r}")

    path = Path(vendor).expanduser()
    if not path.is_absolute():
        path = project_dir / path
    return path.resolve()


def get_scaffold_root(project_dir: Path) -> Path:
    """Scaffold files land next to the vendor directory, i.e. in the project root."""

    return resolve_vendor_dir(project_dir).parent
