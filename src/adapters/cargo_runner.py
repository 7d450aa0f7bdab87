"""Lanzador de soluciones vía `cargo run`.

Envoltorio fino: no mide tiempos ni parsea la salida, solo delega en cargo con
la salida estándar heredada.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from core.domain.errors import FilesystemError
from core.domain.models import ScaffoldRequest

logger = logging.getLogger(__name__)


def cargo_command(request: ScaffoldRequest, *, release: bool = False) -> list[str]:
    command = ["cargo", "run", "-p", request.package_name]
    if release:
        command.append("--release")
    return command


def run_solution(request: ScaffoldRequest, *, root: Path, release: bool = False) -> int:
    """Ejecuta la solución del día y devuelve el código de salida de cargo."""

    day_dir = root / request.relative_dir
    if not day_dir.is_dir():
        raise FilesystemError(
            f"{day_dir} does not exist, run `mush scaffold -d {request.day} -y {request.year}` first",
            day_dir,
        )

    cargo = shutil.which("cargo")
    if cargo is None:
        raise FilesystemError("cargo not found on PATH")

    command = cargo_command(request, release=release)
    command[0] = cargo
    logger.debug("running %s in %s", " ".join(command), root)
    completed = subprocess.run(command, cwd=root, check=False)
    return completed.returncode
