"""CLI principal (Typer).

Comandos:
- `check`: ejecuta la verificación cart vs cart-search.
- `doctor`: diagnóstico del keyfile y conectividad.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.json_exporter import export_report_json
from cli import doctor
from cli.ui_components import (
    build_differences_table,
    build_failure_panel,
    build_summary_table,
    print_banner,
)
from core.config import AppSettings
from core.domain.enums import SearchType
from core.domain.models import CartCheckReport
from core.errors import CartCheckError
from core.logger import configure_logging
from core.services.cart_check import CheckRequest, run_cart_check

__version__ = "1.0.0"

EXIT_NETWORK_FAILURE = 1
EXIT_CONFIG_ERROR = 2

app = typer.Typer(no_args_is_help=True, help="Compare search results with cart-search results for a cart.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from exc


def _version_callback(value: bool) -> None:
    if value:
        _console.print(__version__)
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """cart-search-check."""


def print_report(console: Console, report: CartCheckReport) -> None:
    console.print(build_summary_table(report))
    if report.failure is not None:
        console.print(build_failure_panel(report))
        return

    differences = report.differences
    if differences is False:
        console.print(
            f"Different contents Cart size: {len(report.cart_elements)} -- Search size {len(report.cart_search_ids)}"
        )
        return

    console.print(f"Differences: {differences!r}", markup=False, highlight=False)
    if differences:
        console.print(build_differences_table(differences))
    else:
        console.print("[green]Cart and cart search contain the same @ids.[/green]")


@app.command()
def check(
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Key of keyfile (default: localhost)."),
    keyfile: Optional[Path] = typer.Option(None, "--keyfile", "-f", help="Keyfile name/path (default: keypairs.json)."),
    cart: Optional[str] = typer.Option(None, "--cart", "-c", help="@id of cart."),
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Query string to search."),
    search_type: SearchType = typer.Option(
        SearchType.SEARCH,
        "--type",
        "-t",
        help="Cart search type (search, matrix, report).",
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Debug flag."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the JSON report to this path."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
) -> None:
    """Search, fill the cart with the results, run cart search and compare."""

    settings = _load_settings()
    logger = configure_logging("DEBUG" if debug else settings.log_level)
    if not no_banner:
        print_banner(_console)

    request = CheckRequest(
        cart=cart,
        key=key or settings.default_key,
        keyfile=keyfile or settings.default_keyfile,
        query=query or settings.default_query,
        search_type=search_type,
        debug=debug,
    )

    try:
        report = asyncio.run(run_cart_check(request, settings=settings, logger=logger))
    except CartCheckError as exc:
        _console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from exc

    print_report(_console, report)

    if output is not None:
        path = export_report_json(report=report, output_path=output)
        _console.print(f"[green]Saved report to:[/green] {escape(str(path))}")

    if report.failure is not None:
        raise typer.Exit(code=EXIT_NETWORK_FAILURE)


def run() -> None:
    app()
