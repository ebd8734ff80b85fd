"""Comparación de los @ids del cart con los de cart-search."""

from __future__ import annotations

from typing import Literal, Sequence


def compare_carts(cart0: Sequence[str], cart1: Sequence[str]) -> list[str] | Literal[False]:
    """Compara dos colecciones de @ids ignorando el orden.

    Devuelve `False` si los tamaños difieren. Si no, ordena ambas y devuelve
    los elementos de `cart0` cuya posición ordenada no coincide con la de
    `cart1` (lista vacía = mismo contenido).

    Nota:
    - Es una comparación posicional tras ordenar, no una diferencia de
      conjuntos: con duplicados puede reportar de más o de menos.
    """

    if len(cart0) != len(cart1):
        return False

    sorted0 = sorted(cart0)
    sorted1 = sorted(cart1)
    return [item for item, other in zip(sorted0, sorted1) if item != other]
