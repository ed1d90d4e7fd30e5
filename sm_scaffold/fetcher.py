from __future__ import annotations

import logging
import os
import stat
from pathlib import Path, PurePosixPath
from typing import Callable
from urllib.parse import quote, urlparse

import httpx

from sm_scaffold.errors import ConfigError, FilesystemError, HttpStatusError, NetworkError
from sm_scaffold.http_utils import DEFAULT_TIMEOUT_SECONDS, build_client, describe_exception
from sm_scaffold.models import (
    ERROR_FILESYSTEM,
    ERROR_HTTP_STATUS,
    ERROR_NETWORK,
    FetchOutcome,
    FetchReport,
    ScaffoldRequest,
)

LOGGER = logging.getLogger(__name__)

VERSION_PLACEHOLDER = "{version}"
PATH_PLACEHOLDER = "{path}"

Echo = Callable[[str], None]


def resolve_url(url_template: str, version: str, path: str) -> str:
    """Substitute version and path into the template.

    Both segments are percent-encoded but keep their "/" separators, so
    branch names like ``release/1.x`` and nested scaffold files map onto
    nested remote paths.
    """

    return url_template.replace(VERSION_PLACEHOLDER, quote(version, safe="/")).replace(
        PATH_PLACEHOLDER, quote(path, safe="/")
    )


def validate_request(request: ScaffoldRequest) -> None:
    template = request.url_template
    for placeholder in (VERSION_PLACEHOLDER, PATH_PLACEHOLDER):
        count = template.count(placeholder)
        if count != 1:
            raise ConfigError(f"url template must contain {placeholder} exactly once (found {count}): {template}")

    parsed = urlparse(template)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ConfigError(f"url template is not an http(s) URL: {template}")

    if not request.version.strip():
        raise ConfigError("version must not be empty")

    if not request.file_list:
        raise ConfigError("file list must not be empty")

    for path in request.file_list:
        pure = PurePosixPath(path)
        if not path.strip() or pure.is_absolute() or ".." in pure.parts:
            raise ConfigError(f"scaffold path must be relative and stay inside the destination: {path!r}")

    if not str(request.destination_dir).strip():
        raise ConfigError("destination directory is not set")


class ScaffoldFetcher:
    def __init__(self, client: httpx.Client, *, echo: Echo = print) -> None:
        self.client = client
        self.echo = echo

    def fetch(self, request: ScaffoldRequest) -> FetchReport:
        """Validate the request, then download every file in it.

        Returns the report on success. On failure raises a FetchError subclass
        whose ``report`` holds the outcomes attempted so far.
        """

        validate_request(request)
        return self.download(request)

    def download(self, request: ScaffoldRequest) -> FetchReport:
        """Download an already validated request, in order, stopping at the first failure."""

        report = FetchReport()

        destination = Path(request.destination_dir)
        try:
            destination.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(
                f"cannot create destination {destination}: {describe_exception(exc)}",
                report=report,
            ) from exc

        for path in request.file_list:
            url = resolve_url(request.url_template, request.version, path)
            outcome = self._fetch_one(url, path, destination, request, report)
            report.outcomes.append(outcome)
        return report

    def _fetch_one(
        self,
        url: str,
        path: str,
        destination: Path,
        request: ScaffoldRequest,
        report: FetchReport,
    ) -> FetchOutcome:
        self.echo(f"Fetching {url}")
        LOGGER.debug("GET %s -> %s", url, destination / path)

        try:
            resp = self.client.get(url)
        except httpx.RequestError as exc:
            detail = describe_exception(exc)
            self._record_failure(report, path, url, ERROR_NETWORK, detail)
            raise NetworkError(f"failed to fetch {path} from {url}: {detail}", path=path, report=report) from exc

        if not resp.is_success:
            detail = f"HTTP {resp.status_code}"
            self._record_failure(report, path, url, ERROR_HTTP_STATUS, detail)
            raise HttpStatusError(
                f"failed to fetch {path} from {url}: {detail}",
                status_code=resp.status_code,
                path=path,
                report=report,
            )

        data = resp.content
        target = destination / path
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
            if PurePosixPath(path).name in request.executables:
                mode = target.stat().st_mode
                os.chmod(target, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        except OSError as exc:
            detail = describe_exception(exc)
            self._record_failure(report, path, url, ERROR_FILESYSTEM, detail)
            raise FilesystemError(f"failed to write {path} to {target}: {detail}", path=path, report=report) from exc

        self.echo(f"Wrote {path} ({len(data)} bytes)")
        return FetchOutcome(path=path, url=url, ok=True, bytes_written=len(data))

    @staticmethod
    def _record_failure(report: FetchReport, path: str, url: str, kind: str, detail: str) -> None:
        LOGGER.warning("scaffold fetch failed: path=%s kind=%s detail=%s", path, kind, detail)
        report.outcomes.append(FetchOutcome(path=path, url=url, ok=False, error_kind=kind, detail=detail))


def fetch(
    request: ScaffoldRequest,
    *,
    client: httpx.Client | None = None,
    echo: Echo = print,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> FetchReport:
    # Validate before opening a client so a bad request never touches the network.
    validate_request(request)
    if client is not None:
        return ScaffoldFetcher(client, echo=echo).download(request)
    with build_client(timeout=timeout) as own_client:
        return ScaffoldFetcher(own_client, echo=echo).download(request)
