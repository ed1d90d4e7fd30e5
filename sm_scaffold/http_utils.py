from __future__ import annotations

import httpx


DEFAULT_TIMEOUT_SECONDS = 25.0

DEFAULT_HEADERS = {
    "User-Agent": "sm-scaffold (+https://github.com/universityofadelaide/sm-scaffold)",
    "Accept": "*/*",
}


def build_client(
    *,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    return httpx.Client(
        timeout=timeout,
        headers=DEFAULT_HEADERS,
        follow_redirects=True,
        transport=transport,
    )


def describe_exception(exc: Exception) -> str:
    return f"{type(exc).__name__}: {exc}"
