from __future__ import annotations

from sm_scaffold.models import FetchReport


class ScaffoldError(Exception):
    """Base error for a scaffold run. Carries whatever was fetched before the failure."""

    def __init__(self, message: str, *, report: FetchReport | None = None) -> None:
        super().__init__(message)
        self.report = report if report is not None else FetchReport()


class ConfigError(ScaffoldError):
    pass


class FetchError(ScaffoldError):
    def __init__(self, message: str, *, path: str | None = None, report: FetchReport | None = None) -> None:
        super().__init__(message, report=report)
        self.path = path


class NetworkError(FetchError):
    pass


class HttpStatusError(FetchError):
    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        path: str | None = None,
        report: FetchReport | None = None,
    ) -> None:
        super().__init__(message, path=path, report=report)
        self.status_code = status_code


class FilesystemError(FetchError):
    pass
