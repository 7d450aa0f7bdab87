"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import FileOutcome, ScaffoldReport


def print_banner(console: Console, subtitle: str) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("mush", style="bold green")
    sub = Text(subtitle, style="dim")
    body = Align.center(Text.assemble(title, "\n", sub), vertical="middle")
    console.print(Panel(body, border_style="green", padding=(0, 4)))


def configure_logging(console: Console, *, verbose: bool = False) -> None:
    """Instala un `RichHandler` sobre stderr (WARNING, o DEBUG con --verbose)."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=verbose, rich_tracebacks=verbose)],
        force=True,
    )
    # httpx loguea cada request en INFO; solo interesa con --verbose.
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _display(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def build_files_table(outcomes: Iterable[FileOutcome], *, root: Path, title: str) -> Table:
    """Tabla de ficheros gestionados: creados vs. respetados."""

    table = Table(title=title)
    table.add_column("File", style="cyan", no_wrap=True)
    table.add_column("Status", style="white")
    for outcome in outcomes:
        status = "[green]created[/green]" if outcome.created else "[yellow]kept[/yellow]"
        table.add_row(_display(outcome.path, root), status)
    return table


def build_scaffold_table(report: ScaffoldReport, *, root: Path) -> Table:
    req = report.request
    return build_files_table(
        report.files,
        root=root,
        title=f"Day {req.day:02d} / {req.year} ({req.package_name})",
    )
