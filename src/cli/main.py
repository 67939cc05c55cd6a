"""SOLID Showcase CLI (Typer).

Comandos:
- `run`: ejecuta las demostraciones conformes.
- `violation`: ejecuta la variante no conforme de LSP/ISP (termina en error).
- `list` / `explain`: información de los principios.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.markup import escape

from adapters.json_exporter import render_reports_json
from adapters.output_sinks import MemorySink, PrintSink, RichConsoleSink
from cli.ui_components import (
    build_explain_panel,
    build_principles_table,
    build_steps_table,
    print_banner,
    print_report_header,
)
from core.config import AppSettings
from core.domain.principle import Principle
from core.errors import ShowcaseError
from core.interfaces.output import OutputSink
from core.logging_setup import configure_logging
from core.services.showcase_runner import CATALOG, get_showcase, run_all, run_showcase, run_violation

app = typer.Typer(
    no_args_is_help=True,
    help="Minimal, runnable demonstrations of the five SOLID principles.",
)

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _fail(exc: ShowcaseError) -> None:
    _err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    raise typer.Exit(code=1)


def _load_settings() -> AppSettings:
    settings = AppSettings()
    configure_logging(settings.log_level)
    return settings


def _parse_all(names: list[str]) -> list[Principle]:
    return [Principle.parse(name) for name in names]


@app.command(name="run")
def run_command(
    principles: list[str] | None = typer.Argument(
        None,
        help="Principles to run (srp, ocp, lsp, isp, dip). Defaults to the configured set.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print reports as JSON instead of text."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the banner."),
    plain: bool = typer.Option(False, "--plain", help="Print only the literal lines, unstyled."),
    details: bool = typer.Option(False, "--details", help="Show a step table after each showcase."),
) -> None:
    """Run the compliant demonstrations."""

    settings = _load_settings()
    try:
        selected = _parse_all(principles) if principles else list(settings.principles)
    except ShowcaseError as exc:
        _fail(exc)
        return

    if as_json:
        reports = run_all(selected, sink=MemorySink())
        typer.echo(render_reports_json(reports), nl=False)
        return

    styled = settings.styled_output and not plain
    if styled and settings.show_banner and not no_banner:
        print_banner(_console)

    sink: OutputSink = RichConsoleSink(_console) if styled else PrintSink()
    for principle in selected:
        if styled:
            print_report_header(_console, principle.label())
        report = run_showcase(principle, sink)
        if styled and details:
            _console.print(build_steps_table(report))
    logger.info("Ran %d showcase(s)", len(selected))


@app.command()
def violation(
    principle: str = typer.Argument(..., help="Principle with a non-compliant demo (lsp, isp)."),
    plain: bool = typer.Option(False, "--plain", help="Print only the literal lines, unstyled."),
) -> None:
    """Run a non-compliant demonstration; it ends with an unsupported-operation error."""

    settings = _load_settings()
    styled = settings.styled_output and not plain
    try:
        showcase = get_showcase(principle)
        if styled:
            print_report_header(_console, f"{showcase.principle.label()} (violation)", violation=True)
        sink: OutputSink = RichConsoleSink(_console) if styled else PrintSink()
        run_violation(showcase.principle, sink)
    except ShowcaseError as exc:
        _fail(exc)


@app.command(name="list")
def list_command() -> None:
    """List the available principles."""

    _load_settings()
    _console.print(build_principles_table(list(CATALOG.values())))


@app.command()
def explain(principle: str = typer.Argument(..., help="srp, ocp, lsp, isp or dip.")) -> None:
    """Explain one principle and name the types that demonstrate it."""

    _load_settings()
    try:
        showcase = get_showcase(principle)
    except ShowcaseError as exc:
        _fail(exc)
        return
    _console.print(build_explain_panel(showcase))


def run() -> None:
    app()
