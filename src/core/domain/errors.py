"""Errores del dominio.

Taxonomía cerrada: cada fallo que la CLI puede mostrar es una subclase de
`MushError` con un `kind` estable. Los componentes lanzan; solo la CLI captura.
"""

from __future__ import annotations

from pathlib import Path


class MushError(Exception):
    """Base de todos los errores reportables por la CLI."""

    kind = "error"


class FetchError(MushError):
    """Fallo al obtener el input de un puzzle."""


class MissingCredentialError(FetchError):
    kind = "missing-credential"

    def __init__(self, variable: str = "AOC_SESSION") -> None:
        super().__init__(
            f"{variable} is not set (export it or put it in .env, see `mush init`)"
        )
        self.variable = variable


class HttpStatusError(FetchError):
    kind = "http-error"

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"GET {url} returned HTTP {status_code}")
        self.status_code = status_code
        self.url = url


class NetworkError(FetchError):
    kind = "network-error"

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"GET {url} failed: {reason}")
        self.url = url
        self.reason = reason


class FilesystemError(MushError):
    kind = "filesystem-error"

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class SolutionRunError(MushError):
    kind = "run-error"

    def __init__(self, package: str, returncode: int) -> None:
        super().__init__(f"cargo run -p {package} exited with status {returncode}")
        self.package = package
        self.returncode = returncode

    @property
    def exit_code(self) -> int:
        """Código para el shell: una señal (returncode < 0) se mapea a 128 + n."""

        if self.returncode < 0:
            return 128 + abs(self.returncode)
        return self.returncode


class ConfigError(MushError):
    kind = "config-error"
