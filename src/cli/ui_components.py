"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `check` y `doctor`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import CartCheckReport


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("cart-search-check", style="bold cyan")
    subtitle = Text("Search • Cart • Cart search", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_summary_table(report: CartCheckReport) -> Table:
    table = Table(title="Cart check", show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("Key", report.key)
    table.add_row("Server", report.server)
    table.add_row("Cart", report.cart)
    table.add_row("Query", report.query)
    table.add_row("Search results", str(len(report.search_ids)))
    table.add_row("Cart elements", str(len(report.cart_elements)))
    table.add_row("Cart search results", str(len(report.cart_search_ids)))
    table.add_row("Stage", report.stage.label())
    return table


def build_differences_table(differences: list[str]) -> Table:
    """Tabla con los @ids que no coinciden tras ordenar."""

    table = Table(title="Differences")
    table.add_column("#", style="dim", justify="right")
    table.add_column("@id", style="magenta")
    for index, item in enumerate(differences, start=1):
        table.add_row(str(index), item)
    return table


def build_failure_panel(report: CartCheckReport) -> Panel:
    failure = report.failure
    body = Text()
    if failure is not None:
        body.append(f"Operation: {failure.operation}\n", style="bold")
        if failure.status_code is not None:
            body.append(f"HTTP status: {failure.status_code}\n")
        body.append(failure.message)
    return Panel(body, title=Text(f"Failed while {report.stage.label()}", style="bold red"), border_style="red")
