"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y headers (User-Agent) para todas las peticiones.
- Facilita testeo: respx intercepta el transporte de este cliente.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono con los defaults de la app.

    Una sola petición bloqueante por invocación de la CLI; no hace falta
    cliente async.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "text/plain,*/*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=False,
        headers=headers,
    )
