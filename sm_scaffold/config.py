from __future__ import annotations

import os
from dataclasses import dataclass, field

from sm_scaffold.errors import ConfigError

DEFAULT_SOURCE = "https://raw.githubusercontent.com/universityofadelaide/sm-scaffold/{version}/{path}"
DEFAULT_VERSION = "master"
DEFAULT_FILENAMES = [
    "RoboFileBase.php",
    "RoboFileDrupalDeploymentInterface.php",
    "dsh",
]

# Shell helpers shipped in the scaffold that the project runs directly.
DEFAULT_EXECUTABLES = ["dsh"]


def parse_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class ScaffoldConfig:
    source: str = DEFAULT_SOURCE
    version: str = DEFAULT_VERSION
    filenames: list[str] = field(default_factory=lambda: list(DEFAULT_FILENAMES))
    executables: list[str] = field(default_factory=lambda: list(DEFAULT_EXECUTABLES))

    # HTTP
    timeout_seconds: float = 25.0

    dry_run: bool = False

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a config from SM_SCAFFOLD_* variables, falling back to the defaults."""

        config = cls()
        config.source = os.getenv("SM_SCAFFOLD_SOURCE") or config.source
        config.version = os.getenv("SM_SCAFFOLD_VERSION") or config.version

        files = os.getenv("SM_SCAFFOLD_FILES")
        if files:
            config.filenames = parse_csv(files)

        timeout = os.getenv("SM_SCAFFOLD_TIMEOUT")
        if timeout:
            try:
                config.timeout_seconds = float(timeout)
            except ValueError as exc:
                raise ConfigError(f"SM_SCAFFOLD_TIMEOUT must be a number of seconds, got {timeout!r}") from exc
            if config.timeout_seconds <= 0:
                raise ConfigError(f"SM_SCAFFOLD_TIMEOUT must be positive, got {timeout!r}")
        return config
