"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import ShowcaseReport
from core.domain.principle import Variant
from core.services.showcase_runner import Showcase


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Se omite en modos no interactivos (JSON, `--plain`).
    """

    title = Text("SOLID Showcase", style="bold cyan")
    subtitle = Text("SRP • OCP • LSP • ISP • DIP", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_report_header(console: Console, report_title: str, *, violation: bool = False) -> None:
    style = "bold red" if violation else "bold green"
    console.rule(Text(report_title, style=style), style="dim")


def build_principles_table(showcases: list[Showcase]) -> Table:
    """Tabla con los principios disponibles."""

    table = Table(title="SOLID Principles")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Principle", style="white")
    table.add_column("Summary", style="dim")
    table.add_column("Violation demo", style="magenta")
    for showcase in showcases:
        p = showcase.principle
        table.add_row(p.value, p.label(), p.summary(), "yes" if showcase.has_violation else "no")
    return table


def build_explain_panel(showcase: Showcase) -> Panel:
    """Panel con el resumen de un principio y los tipos que lo demuestran."""

    p = showcase.principle
    body = Text()
    body.append(p.summary() + "\n\n")
    body.append("Types:\n", style="bold")
    for name in showcase.types:
        body.append(f"- {name}\n")
    if showcase.has_violation:
        body.append(f"\nRun `solid-showcase violation {p.value}` to see it broken.", style="dim")
    return Panel(body, title=Text(p.label(), style="bold yellow"), border_style="yellow")


def build_steps_table(report: ShowcaseReport) -> Table:
    """Detalle paso a paso de un reporte (tipo, operación, salida)."""

    table = Table(title=report.title, show_lines=False)
    table.add_column("Subject", style="cyan", no_wrap=True)
    table.add_column("Operation", style="white")
    table.add_column("Output", style="green" if report.variant is Variant.COMPLIANT else "red")
    for step in report.steps:
        table.add_row(step.subject, f"{step.operation}()", step.output)
    return table
