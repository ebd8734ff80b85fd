"""Contrato del cliente del portal.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que el orquestador se pruebe con un cliente falso sin HTTP.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Cart
from core.domain.results import Result


@runtime_checkable
class CartPortal(Protocol):
    """Operaciones del portal que usa la verificación de carts.

    Reglas de diseño:
    - Todas son asíncronas porque hacen I/O (HTTP).
    - Nunca lanzan por fallos HTTP: devuelven `Failure`.
    """

    async def search_ids(self, query: str) -> Result[list[str]]:
        """Ejecuta `/search/` y devuelve los @ids de los resultados."""

        ...

    async def get_writeable_cart(self, cart_id: str) -> Result[Cart]:
        """Obtiene el cart en su frame editable."""

        ...

    async def write_cart(self, cart: Cart) -> Result[list[str]]:
        """Persiste el cart y devuelve los elements confirmados."""

        ...

    async def search_cart(self, cart_id: str) -> Result[list[str]]:
        """Ejecuta `/cart-search/` para el cart indicado."""

        ...
