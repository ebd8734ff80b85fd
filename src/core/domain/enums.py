"""Enumeraciones compartidas entre CLI y servicios.

Viven en el dominio para que la CLI y el orquestador compartan una única
fuente de verdad sin importar adaptadores.
"""

from __future__ import annotations

from enum import Enum


class SearchType(str, Enum):
    """Tipo de cart search solicitado.

    Se acepta en la CLI pero todavía no cambia el endpoint consultado.
    """

    SEARCH = "search"
    MATRIX = "matrix"
    REPORT = "report"

    @classmethod
    def default(cls) -> "SearchType":
        return cls.SEARCH


class CheckStage(str, Enum):
    """Etapas del flujo de verificación, en orden de ejecución."""

    LOADING_CREDENTIALS = "loading_credentials"
    SEARCHING = "searching"
    READING_CART = "reading_cart"
    WRITING_CART = "writing_cart"
    SEARCHING_CART = "searching_cart"
    COMPARING = "comparing"
    DONE = "done"

    def label(self) -> str:
        """Human readable label for progress output and logging."""

        return self.value.replace("_", " ")
