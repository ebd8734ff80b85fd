"""Errores del Core.

Solo los errores fatales viven aquí: un keyfile ilegible o una entrada
inexistente abortan la ejecución. Los fallos HTTP no se lanzan, se devuelven
como `core.domain.results.Failure`.
"""

from __future__ import annotations


class CartCheckError(Exception):
    """Base de errores de la aplicación."""


class ConfigError(CartCheckError):
    """Configuración inválida (key inexistente, cart no indicado)."""


class KeyfileError(CartCheckError):
    """El keyfile no existe, no es JSON válido o no cumple el esquema."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"cannot load keyfile {path}: {reason}")
        self.path = path
        self.reason = reason
