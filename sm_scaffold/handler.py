from __future__ import annotations

from pathlib import Path

import httpx

from sm_scaffold.config import ScaffoldConfig
from sm_scaffold.fetcher import Echo, fetch
from sm_scaffold.models import FetchReport, ScaffoldRequest
from sm_scaffold.paths import get_scaffold_root


class ScaffoldHandler:
    """Downloads the Site Manager scaffold files into a project.

    Holds the host side of a run: the project directory whose composer
    configuration decides the destination, and the output sink progress is
    written to.
    """

    def __init__(
        self,
        project_dir: Path,
        config: ScaffoldConfig,
        *,
        echo: Echo = print,
        client: httpx.Client | None = None,
    ) -> None:
        self.project_dir = project_dir
        self.config = config
        self.echo = echo
        self.client = client

    def build_request(self) -> ScaffoldRequest:
        return ScaffoldRequest(
            url_template=self.config.source,
            version=self.config.version,
            file_list=tuple(self.config.filenames),
            destination_dir=get_scaffold_root(self.project_dir),
            executables=frozenset(self.config.executables),
        )

    def download_scaffold(self) -> FetchReport:
        return fetch(
            self.build_request(),
            client=self.client,
            echo=self.echo,
            timeout=self.config.timeout_seconds,
        )

    def on_post_cmd_event(self, event: str) -> FetchReport:
        return self.download_scaffold()
