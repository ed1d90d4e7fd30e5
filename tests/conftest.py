from __future__ import annotations

from typing import Callable

import httpx
import pytest

from sm_scaffold.http_utils import build_client


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host or developer settings out of the tests."""
    for name in (
        "COMPOSER_VENDOR_DIR",
        "SM_SCAFFOLD_SOURCE",
        "SM_SCAFFOLD_VERSION",
        "SM_SCAFFOLD_FILES",
        "SM_SCAFFOLD_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)


class FakeRemote:
    """Serves scaffold files from a dict keyed by URL path and records every request."""

    def __init__(self, files: dict[str, bytes], statuses: dict[str, int] | None = None) -> None:
        self.files = files
        self.statuses = statuses or {}
        self.requested: list[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requested.append(str(request.url))
        status = self.statuses.get(request.url.path, 200)
        if status != 200:
            return httpx.Response(status, content=b"not found")
        body = self.files.get(request.url.path)
        if body is None:
            return httpx.Response(404, content=b"not found")
        return httpx.Response(200, content=body)

    def client(self) -> httpx.Client:
        return build_client(transport=httpx.MockTransport(self))


@pytest.fixture
def make_remote() -> Callable[..., FakeRemote]:
    return FakeRemote
