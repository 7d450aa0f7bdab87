"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/filesystem) lean config de forma consistente.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.errors import ConfigError, FilesystemError

# Valor que `mush init` deja en `.env`; equivale a no tener sesión.
SESSION_PLACEHOLDER = "your_session_cookie_here"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_env_vars(env_path: Path, values: dict[str, str]) -> Path:
    """Escribe/actualiza variables en un `.env`, conservando las demás claves."""

    try:
        existing: dict[str, str] = {}
        if env_path.exists():
            existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

        existing.update({k: v for k, v in values.items() if v is not None})

        lines = [f"{key}={existing[key]}" for key in sorted(existing.keys())]
        env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    except OSError as exc:
        raise FilesystemError(f"cannot update {env_path}: {exc.strerror or exc}", env_path) from exc
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="AOC_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    session: str | None = Field(
        default=None,
        description="Cookie de sesión de adventofcode.com (AOC_SESSION).",
    )
    base_url: str = Field(
        default="https://adventofcode.com",
        min_length=8,
        description="Base URL del sitio de puzzles.",
    )
    user_agent: str = Field(
        default="mush/0.1 (+https://github.com/cmoron/aoc-rustdolph)",
        min_length=1,
        description="User-Agent para las descargas de input.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    workspace_root: Path = Field(
        default=Path("."),
        description="Raíz del workspace Cargo donde viven las soluciones.",
    )

    def session_cookie(self) -> str | None:
        """Devuelve la sesión utilizable, o None si falta o sigue siendo la plantilla."""

        value = (self.session or "").strip()
        if not value or value == SESSION_PLACEHOLDER:
            return None
        return value


def _describe(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        name = "_".join(str(part) for part in error["loc"]).upper()
        problems.append(f"AOC_{name}: {error['msg']}")
    return "invalid configuration: " + "; ".join(problems)


def load_settings(root: Path | None = None) -> tuple[AppSettings, Path]:
    """Carga la config y resuelve la raíz del workspace.

    Orden de precedencia: variables de entorno, `<root>/.env`, `./.env`.
    `init` y `doctor set-session` escriben en `<root>/.env`, así que esa copia
    tiene que leerse aunque la CLI se lance desde otro directorio.
    """

    try:
        settings = AppSettings()
        workspace = root or settings.workspace_root
        workspace_env = workspace / ".env"
        if workspace_env.resolve() != Path(".env").resolve():
            settings = AppSettings(_env_file=(".env", workspace_env))
    except ValidationError as exc:
        raise ConfigError(_describe(exc)) from exc
    return settings, workspace
