"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y headers JSON/Authorization del portal.
- Facilita testeo: se puede sustituir por un stub/mocked client.
"""

from __future__ import annotations

from typing import Any

import httpx

from core.config import AppSettings

JSON_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


def build_async_client(
    settings: AppSettings | None = None,
    *,
    auth: str | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` para hablar JSON con el portal.

    Sin `http_timeout_seconds` se usan los timeouts por defecto de httpx.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        **JSON_HEADERS,
    }
    if auth:
        headers["Authorization"] = auth
    if extra_headers:
        headers.update(extra_headers)

    kwargs: dict[str, Any] = {"headers": headers, "follow_redirects": True}
    if settings.http_timeout_seconds is not None:
        kwargs["timeout"] = httpx.Timeout(settings.http_timeout_seconds)
    return httpx.AsyncClient(**kwargs)
