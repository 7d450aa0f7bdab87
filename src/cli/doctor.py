"""Doctor command for environment diagnostics."""

from __future__ import annotations

import shutil
from pathlib import Path

import httpx
import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from adapters.http_client import build_client
from core.config import AppSettings, write_env_vars
from core.domain.errors import MushError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()
_err_console = Console(stderr=True)


def _settings(ctx: typer.Context) -> tuple[AppSettings, Path]:
    return ctx.obj.settings, ctx.obj.root


def _check_http(settings: AppSettings) -> tuple[bool, str]:
    """Unauthenticated HEAD against the base URL (no session sent)."""

    try:
        with build_client(settings) as client:
            response = client.head(settings.base_url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or type(exc).__name__


@app.command()
def check(
    ctx: typer.Context,
    offline: bool = typer.Option(False, "--offline", help="Skip the connectivity check."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings, root = _settings(ctx)

    table = Table(title="mush doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    if settings.session_cookie():
        table.add_row("AOC_SESSION", "OK", "Session cookie configured")
    else:
        table.add_row("AOC_SESSION", "MISSING", "Needed by `scaffold` to download inputs")
    table.add_row("Base URL", "OK", settings.base_url)

    workspace = root / "Cargo.toml"
    if workspace.is_file():
        table.add_row("Workspace", "OK", str(workspace))
    else:
        table.add_row("Workspace", "MISSING", "Run `mush init`")

    cargo = shutil.which("cargo")
    table.add_row("cargo", "OK" if cargo else "MISSING", cargo or "Needed by `mush run`")

    if not offline:
        ok_http, detail_http = _check_http(settings)
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command(name="set-session")
def set_session(ctx: typer.Context) -> None:
    """Store the session cookie in the workspace .env (no manual editing)."""

    _, root = _settings(ctx)
    session = typer.prompt("Session cookie", hide_input=True).strip()
    if not session:
        raise typer.BadParameter("session cookie cannot be empty")

    try:
        env_path = write_env_vars(root / ".env", {"AOC_SESSION": session})
    except MushError as exc:
        _err_console.print(Text.assemble((f"error[{exc.kind}]", "bold red"), ": ", str(exc)))
        raise typer.Exit(1) from exc

    _console.print(f"[green]Saved session to:[/green] {env_path}")
