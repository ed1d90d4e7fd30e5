from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

ERROR_NETWORK = "network"
ERROR_HTTP_STATUS = "http_status"
ERROR_FILESYSTEM = "filesystem"


@dataclass(frozen=True, slots=True)
class ScaffoldRequest:
    url_template: str
    file_list: tuple[str, ...]
    destination_dir: Path
    version: str = "master"
    executables: frozenset[str] = frozenset()


@dataclass(slots=True)
class FetchOutcome:
    path: str
    url: str
    ok: bool
    bytes_written: int = 0
    error_kind: str | None = None
    detail: str | None = None


@dataclass
class FetchReport:
    outcomes: list[FetchOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> list[FetchOutcome]:
        return [o for o in self.outcomes if o.ok]

    @property
    def failed(self) -> list[FetchOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def ok(self) -> bool:
        return bool(self.outcomes) and not self.failed

    @property
    def bytes_total(self) -> int:
        return sum(o.bytes_written for o in self.succeeded)
