"""lic command-line entry point.

Direct mode (default) resolves everything from flags, git and the clock;
`--interactive` prompts for whatever the flags leave out. Every domain error
ends the process with exit code 1 and no LICENSE written.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.github_licenses import GitHubLicenseRegistry
from adapters.http_client import build_async_client
from cli.ui_components import TyperPrompter, print_banner
from core.config import APP_NAME, APP_VERSION, AppSettings
from core.domain.errors import LicError
from core.services.license_pipeline import (
    LicenseRequest,
    PipelineResult,
    run_direct,
    run_interactive,
)

app = typer.Typer(
    add_completion=False,
    help="Initialize a LICENSE file using GitHub licenses API (Default: CLI Mode).",
)

_console = Console()
_err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"{APP_NAME} {APP_VERSION}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=_err_console, show_path=False)],
    )


async def _generate(request: LicenseRequest, *, interactive: bool, settings: AppSettings) -> PipelineResult:
    async with build_async_client(settings) as client:
        registry = GitHubLicenseRegistry(client, settings)
        if interactive:
            print_banner(_console)
            prompter = TyperPrompter(_console)
            return await run_interactive(request, registry, prompter.hooks())
        return await run_direct(request, registry)


@app.command()
def generate(
    author: Optional[str] = typer.Option(
        None,
        "--author",
        "-a",
        help="Copyright holder name (defaults to git config user.name).",
    ),
    year: Optional[str] = typer.Option(
        None,
        "--year",
        "-y",
        help="Copyright year (defaults to current year).",
    ),
    license_key: Optional[str] = typer.Option(
        None,
        "--license",
        "-l",
        help="License type (e.g. mit, apache-2.0, gpl-3.0). Defaults to 'mit' in CLI mode.",
    ),
    interactive: bool = typer.Option(
        False,
        "--interactive",
        "-i",
        help="Run in interactive mode (select license via prompts).",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging on stderr."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Create a LICENSE file in the current directory."""

    _configure_logging(verbose)
    request = LicenseRequest(author=author, year=year, license_key=license_key)

    try:
        result = asyncio.run(_generate(request, interactive=interactive, settings=AppSettings()))
    except LicError as exc:
        _err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    params = result.parameters
    name = escape(result.license.name)
    if interactive:
        _console.print(f"[green]✅ {name} license created for {escape(params.author)}![/green]")
    else:
        _console.print(f"Created {name} license for {escape(params.author)} ({escape(params.year)}).")


def run() -> None:
    app()
