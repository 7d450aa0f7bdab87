"""Generación del scaffold de un día.

Compone el File Writer y una `PuzzleInputSource` para producir:

    solutions/<year>/day<NN>/
        Cargo.toml
        src/main.rs
        example.txt
        input.txt

Cada fichero es skip-if-exists por separado, así que relanzar sobre un día a
medio generar solo rellena lo que falta. El input se pide al final y solo si
`input.txt` no existe; si la descarga falla, el error sube a la CLI con los
otros tres ficheros ya en disco.
"""

from __future__ import annotations

import logging
from pathlib import Path

from adapters.file_writer import write_if_absent
from core.domain.errors import FilesystemError
from core.domain.models import FileOutcome, ScaffoldReport, ScaffoldRequest
from core.interfaces.input_source import PuzzleInputSource
from core.templates import render_day_cargo_toml, render_main_rs

logger = logging.getLogger(__name__)


def day_directory(request: ScaffoldRequest, root: Path) -> Path:
    return root / request.relative_dir


def build_scaffold(
    request: ScaffoldRequest,
    *,
    root: Path,
    source: PuzzleInputSource,
) -> ScaffoldReport:
    day_dir = day_directory(request, root)
    src_dir = day_dir / "src"
    try:
        src_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(f"cannot create {src_dir}: {exc.strerror or exc}", src_dir) from exc

    report = ScaffoldReport(request=request, day_dir=day_dir)

    static_files = [
        (day_dir / "Cargo.toml", render_day_cargo_toml(request)),
        (src_dir / "main.rs", render_main_rs(request)),
        (day_dir / "example.txt", ""),
    ]
    for path, content in static_files:
        report.files.append(FileOutcome(path=path, created=write_if_absent(path, content)))

    input_path = day_dir / "input.txt"
    if input_path.exists():
        logger.info("%s already present, skipping download", input_path)
        report.files.append(FileOutcome(path=input_path, created=False))
        return report

    logger.info("fetching input for %s day %d", request.year, request.day)
    text = source.fetch(request)
    report.files.append(FileOutcome(path=input_path, created=write_if_absent(input_path, text)))
    return report
