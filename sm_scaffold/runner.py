from __future__ import annotations

import logging
from pathlib import Path

import httpx

from sm_scaffold import hooks
from sm_scaffold.config import ScaffoldConfig
from sm_scaffold.errors import ScaffoldError
from sm_scaffold.fetcher import Echo, resolve_url, validate_request
from sm_scaffold.handler import ScaffoldHandler
from sm_scaffold.models import FetchReport, ScaffoldRequest

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 2


def _build_summary(request: ScaffoldRequest, report: FetchReport) -> list[str]:
    lines = [
        "--- Scaffold Summary ---",
        f"version: {request.version}",
        f"destination: {request.destination_dir}",
        "files:",
    ]
    for outcome in report.outcomes:
        if outcome.ok:
            lines.append(f"  {outcome.path}: OK ({outcome.bytes_written} bytes)")
        else:
            lines.append(f"  {outcome.path}: {outcome.error_kind} ({outcome.detail})")

    attempted = {o.path for o in report.outcomes}
    for path in request.file_list:
        if path not in attempted:
            lines.append(f"  {path}: SKIPPED")

    lines.append(f"written: {len(report.succeeded)}/{len(request.file_list)} ({report.bytes_total} bytes)")
    return lines


def _dry_run(request: ScaffoldRequest, echo: Echo) -> None:
    validate_request(request)
    echo(f"[Scaffold] Dry run: {len(request.file_list)} file(s) into {request.destination_dir}")
    for path in request.file_list:
        url = resolve_url(request.url_template, request.version, path)
        echo(f"  {url} -> {Path(request.destination_dir) / path}")


def run_scaffold(
    config: ScaffoldConfig,
    project_dir: Path,
    *,
    event: str | None = None,
    echo: Echo = print,
    client: httpx.Client | None = None,
) -> int:
    """Run one scaffold download and translate the result into an exit code.

    With ``event`` set the run goes through the hook registry, so events the
    scaffold is not subscribed to are a successful no-op.
    """

    if event is not None and not hooks.is_subscribed(event):
        echo(f"[Scaffold] No scaffold hook for event {event}, nothing to do.")
        return EXIT_OK

    handler = ScaffoldHandler(project_dir, config, echo=echo, client=client)
    request: ScaffoldRequest | None = None
    try:
        request = handler.build_request()
        if config.dry_run:
            _dry_run(request, echo)
            return EXIT_OK

        echo(f"[Scaffold] Downloading scaffold {request.version} into {request.destination_dir}")
        if event is not None:
            report = hooks.dispatch(event, handler) or FetchReport()
        else:
            report = handler.download_scaffold()
    except ScaffoldError as exc:
        if request is not None:
            echo("\n".join(_build_summary(request, exc.report)))
        LOGGER.debug("scaffold run failed", exc_info=True)
        echo(f"[Scaffold] Error: {exc}")
        return EXIT_ERROR

    echo("\n".join(_build_summary(request, report)))
    echo(f"[Scaffold] Finished with exit={EXIT_OK}.")
    return EXIT_OK
