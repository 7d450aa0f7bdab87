"""Descarga del input de un puzzle desde adventofcode.com.

Una única petición GET autenticada con la cookie de sesión. Sin reintentos: el
usuario vuelve a lanzar `mush scaffold`, que es seguro porque todas las
escrituras son skip-if-exists.
"""

from __future__ import annotations

import logging

import httpx

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.errors import HttpStatusError, MissingCredentialError, NetworkError
from core.domain.models import ScaffoldRequest
from core.interfaces.input_source import PuzzleInputSource

logger = logging.getLogger(__name__)


def input_url(day: int, year: int, base_url: str) -> str:
    return f"{base_url.rstrip('/')}/{year}/day/{day}/input"


def fetch_input(
    day: int,
    year: int,
    *,
    base_url: str | None = None,
    settings: AppSettings | None = None,
) -> str:
    """Descarga el input de `day`/`year` y lo devuelve sin espacios finales.

    Errores:
    - `MissingCredentialError` si no hay sesión (no se hace ninguna petición).
    - `HttpStatusError` si el servidor responde con un status no 2xx.
    - `NetworkError` ante fallos de transporte (DNS, conexión, timeout...).
    """

    settings = settings or AppSettings()
    session = settings.session_cookie()
    if session is None:
        raise MissingCredentialError()

    url = input_url(day, year, base_url or settings.base_url)
    logger.debug("fetching %s", url)

    try:
        with build_client(settings, extra_headers={"Cookie": f"session={session}"}) as client:
            response = client.get(url)
    except httpx.TransportError as exc:
        raise NetworkError(url, str(exc) or type(exc).__name__) from exc

    if not response.is_success:
        raise HttpStatusError(response.status_code, url)

    # Solo el final: el espacio inicial puede ser significativo en algunos puzzles.
    return response.text.rstrip()


class AocInputSource(PuzzleInputSource):
    """Implementación HTTP de `PuzzleInputSource`."""

    def __init__(self, settings: AppSettings | None = None, *, base_url: str | None = None) -> None:
        self._settings = settings or AppSettings()
        self._base_url = base_url

    def fetch(self, request: ScaffoldRequest) -> str:
        return fetch_input(
            request.day,
            request.year,
            base_url=self._base_url,
            settings=self._settings,
        )
