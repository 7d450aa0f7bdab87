"""CLI de mush (Typer).

Comandos:
- `init`: ficheros del workspace Cargo.
- `scaffold`: estructura de un día + descarga del input.
- `run`: `cargo run -p dayNN-YYYY`.
- `doctor`: diagnóstico de entorno.

Solo esta capa captura `MushError`: imprime `error[<kind>]` en stderr y sale
con código != 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.text import Text

from adapters.aoc_input import AocInputSource
from adapters.cargo_runner import run_solution
from cli import doctor
from cli.ui_components import (
    build_files_table,
    build_scaffold_table,
    configure_logging,
    print_banner,
)
from core.config import AppSettings, load_settings
from core.domain.errors import MushError, SolutionRunError
from core.domain.models import FIRST_EVENT_YEAR, ScaffoldRequest
from core.services.scaffold_builder import build_scaffold
from core.services.workspace import initialize_workspace

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Advent of Code scaffolding: workspace, per-day crates and puzzle inputs.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


@dataclass
class CliState:
    settings: AppSettings
    root: Path


def _state(ctx: typer.Context) -> CliState:
    return ctx.obj


def _fail(exc: MushError, *, code: int = 1) -> NoReturn:
    message = Text.assemble((f"error[{exc.kind}]", "bold red"), ": ", str(exc))
    _err_console.print(message)
    raise typer.Exit(code)


def _request(day: int, year: int | None) -> ScaffoldRequest:
    if year is None:
        return ScaffoldRequest(day=day)
    return ScaffoldRequest(day=day, year=year)


DayOption = typer.Option(..., "--day", "-d", min=1, max=25, help="Puzzle day (1-25).")
YearOption = typer.Option(
    None,
    "--year",
    "-y",
    min=FIRST_EVENT_YEAR,
    help="Event year. Defaults to the current year.",
)


@app.callback()
def main(
    ctx: typer.Context,
    root: Optional[Path] = typer.Option(
        None,
        "--root",
        help="Workspace root (defaults to AOC_WORKSPACE_ROOT or the current directory).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    configure_logging(_err_console, verbose=verbose)
    try:
        settings, workspace = load_settings(root)
    except MushError as exc:
        _fail(exc)
    ctx.obj = CliState(settings=settings, root=workspace)


@app.command()
def init(ctx: typer.Context) -> None:
    """Create the workspace Cargo.toml, .gitignore and .env template."""

    state = _state(ctx)
    print_banner(_console, "Workspace init")
    try:
        outcomes = initialize_workspace(state.root)
    except MushError as exc:
        _fail(exc)

    _console.print(build_files_table(outcomes, root=state.root, title="Workspace"))
    _console.print("[green]Workspace ready.[/green] Put your session cookie in [bold].env[/bold] (AOC_SESSION).")


@app.command()
def scaffold(
    ctx: typer.Context,
    day: int = DayOption,
    year: Optional[int] = YearOption,
) -> None:
    """Create solutions/<year>/dayNN and download the puzzle input."""

    state = _state(ctx)
    request = _request(day, year)
    _console.print(f"Preparing day [bold]{request.day}[/bold] of [bold]{request.year}[/bold]...")
    try:
        report = build_scaffold(request, root=state.root, source=AocInputSource(state.settings))
    except MushError as exc:
        _fail(exc)

    _console.print(build_scaffold_table(report, root=state.root))
    if not report.created:
        _console.print("[yellow]Nothing to do, every file was already there.[/yellow]")


@app.command(name="run")
def run_command(
    ctx: typer.Context,
    day: int = DayOption,
    year: Optional[int] = YearOption,
    release: bool = typer.Option(False, "--release", "-r", help="Build with --release."),
) -> None:
    """Run a day's solution with cargo."""

    state = _state(ctx)
    request = _request(day, year)
    _console.print(f"Running [bold]{request.package_name}[/bold]{' (release)' if release else ''}...")
    try:
        returncode = run_solution(request, root=state.root, release=release)
        if returncode != 0:
            raise SolutionRunError(request.package_name, returncode)
    except SolutionRunError as exc:
        _fail(exc, code=exc.exit_code)
    except MushError as exc:
        _fail(exc)


def run() -> None:
    app()
