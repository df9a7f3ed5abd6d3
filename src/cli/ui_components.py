"""Componentes de UI para la CLI (Rich + prompts de Typer).

Separa los detalles visuales y los prompts de la lógica de comandos. Los
prompts se exponen al pipeline como `PromptHooks`; un abort del usuario
(Ctrl-C / EOF) se traduce a `InteractionCancelled`.
"""

from __future__ import annotations

from typing import Sequence

import typer
from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.errors import InteractionCancelled
from core.domain.models import LicenseSummary
from core.services.license_pipeline import PromptHooks


def print_banner(console: Console) -> None:
    """Imprime el banner del modo interactivo."""

    title = Text("📜 Initialize License", style="bold cyan")
    subtitle = Text("LICENSE templates from the GitHub licenses API", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_licenses_table(licenses: Sequence[LicenseSummary]) -> Table:
    """Tabla numerada de licencias para el selector."""

    table = Table(title="Available licenses")
    table.add_column("#", style="dim", justify="right", no_wrap=True)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("SPDX", style="magenta", no_wrap=True)
    table.add_column("Name", style="white")
    for index, summary in enumerate(licenses, start=1):
        table.add_row(str(index), summary.key, summary.spdx_id, summary.name)
    return table


class TyperPrompter:
    """Prompts interactivos sobre una única sesión de consola."""

    def __init__(self, console: Console) -> None:
        self._console = console

    def select_license(self, licenses: Sequence[LicenseSummary]) -> str:
        if not licenses:
            raise InteractionCancelled("The license registry returned no licenses to choose from.")
        self._console.print(build_licenses_table(licenses))

        by_choice: dict[str, str] = {}
        for index, summary in enumerate(licenses, start=1):
            by_choice[str(index)] = summary.key
            by_choice[summary.key.lower()] = summary.key

        while True:
            choice = self._prompt("Pick a license template (key or #)").lower()
            if choice in by_choice:
                return by_choice[choice]
            self._console.print(f"[red]Unknown license:[/red] {escape(choice)}")

    def ask_author(self, default: str) -> str:
        return self._prompt("Copyright holder name", default=default, show_default=True)

    def ask_year(self, default: str) -> str:
        return self._prompt("Copyright year", default=default, show_default=True)

    def hooks(self) -> PromptHooks:
        return PromptHooks(
            select_license=self.select_license,
            ask_author=self.ask_author,
            ask_year=self.ask_year,
        )

    @staticmethod
    def _prompt(text: str, **kwargs: object) -> str:
        try:
            return str(typer.prompt(text, **kwargs)).strip()
        except typer.Abort as exc:
            raise InteractionCancelled("Cancelled by user; no LICENSE file was written.") from exc
