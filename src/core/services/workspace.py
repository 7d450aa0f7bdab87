"""Inicialización única del workspace Cargo (sin red)."""

from __future__ import annotations

from pathlib import Path

from adapters.file_writer import write_if_absent
from core.domain.models import FileOutcome
from core.templates import ENV_TEMPLATE, GITIGNORE, WORKSPACE_CARGO_TOML

WORKSPACE_FILES = (
    ("Cargo.toml", WORKSPACE_CARGO_TOML),
    (".gitignore", GITIGNORE),
    (".env", ENV_TEMPLATE),
)


def initialize_workspace(root: Path) -> list[FileOutcome]:
    """Escribe `Cargo.toml`, `.gitignore` y `.env` en `root` si no existen."""

    outcomes: list[FileOutcome] = []
    for name, content in WORKSPACE_FILES:
        path = root / name
        outcomes.append(FileOutcome(path=path, created=write_if_absent(path, content)))
    return outcomes
