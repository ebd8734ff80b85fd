"""Ejecución como módulo desde `src/`: `python -m main check --cart /carts/<id>/`."""

from __future__ import annotations

from cli.main import run

if __name__ == "__main__":
    run()
