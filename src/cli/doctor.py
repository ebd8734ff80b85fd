"""Doctor command for keyfile and connectivity diagnostics."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adapters.http_client import build_async_client
from adapters.keyfile_loader import load_keyfile, resolve_keypair
from core.auth import auth_from_keypair
from core.config import AppSettings
from core.domain.models import KeypairEntry
from core.errors import CartCheckError

app = typer.Typer(no_args_is_help=True, help="Keyfile and server connectivity checks.")

_console = Console()


async def _check_http(entry: KeypairEntry, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings, auth=auth_from_keypair(entry)) as client:
            response = await client.get(f"{entry.server}/")
        return response.is_success, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run(
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Key of keyfile (defaults to settings)."),
    keyfile: Optional[Path] = typer.Option(None, "--keyfile", "-f", help="Keyfile name/path (defaults to settings)."),
) -> None:
    """Run baseline diagnostics for the selected keyfile entry."""

    settings = AppSettings()
    key = key or settings.default_key
    keyfile = keyfile or settings.default_keyfile

    table = Table(title="cart-search-check Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok = True
    try:
        keyfile_data = load_keyfile(keyfile)
        table.add_row("Keyfile", "OK", f"{escape(str(keyfile))} ({len(keyfile_data.root)} entries)")
        entry = resolve_keypair(keyfile_data, key)
        table.add_row("Key", "OK", f"{key} -> {entry.server}")
    except CartCheckError as exc:
        table.add_row("Keyfile", "FAIL", escape(str(exc)))
        entry = None
        ok = False

    if entry is not None:
        if not entry.key or not entry.secret:
            table.add_row("Credentials", "WARN", "Empty key or secret -> anonymous requests")
        else:
            table.add_row("Credentials", "OK", "Basic auth header built")

        # Connectivity (best-effort)
        ok_http, detail_http = asyncio.run(_check_http(entry, settings))
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)
        ok = ok and ok_http

    timeout = settings.http_timeout_seconds
    table.add_row("HTTP timeout", "OK", "httpx default" if timeout is None else f"{timeout}s")

    _console.print(table)

    if not ok:
        raise typer.Exit(code=1)
