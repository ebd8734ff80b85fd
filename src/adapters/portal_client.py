"""Cliente HTTP del portal (search, carts, cart-search).

Uso:
    async with PortalClient(server, auth) as client:
        ids = await client.search_ids("type=Experiment")
        cart = await client.get_writeable_cart("/carts/abc/")

Política de errores:
- Cualquier fallo (HTTP no-2xx, transporte, JSON inválido, envelope inesperado)
  se registra en el logger y se devuelve como `Failure`. Nunca se lanza.
- No hay reintentos.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client
from adapters.portal_models import SearchEnvelope, UpdateEnvelope
from core.config import AppSettings
from core.domain.models import Cart
from core.domain.results import Failure, Result, Success
from core.interfaces.portal import CartPortal
from core.logger import get_logger

T = TypeVar("T")


def _snippet(text: str, limit: int = 200) -> str:
    text = text.strip()
    if len(text) > limit:
        return text[:limit] + "..."
    return text


class PortalClient(CartPortal):
    """Implementación httpx de `CartPortal`."""

    def __init__(
        self,
        server: str,
        auth: str,
        *,
        settings: AppSettings | None = None,
        logger: logging.Logger | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._server = server.rstrip("/")
        self._logger = logger or get_logger("portal")
        self._owns_client = client is None
        self._client = client or build_async_client(settings, auth=auth)
        if not self._owns_client:
            self._client.headers["Authorization"] = auth

    @property
    def server(self) -> str:
        return self._server

    async def __aenter__(self) -> "PortalClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(
        self,
        operation: str,
        method: str,
        url: str,
        parse: Callable[[Any], T],
        *,
        json: Any = None,
    ) -> Result[T]:
        self._logger.debug("%s %s", method, url)
        try:
            response = await self._client.request(method, url, json=json)
        except httpx.HTTPError as exc:
            return self._fail(operation, f"request failed: {exc}")

        if not response.is_success:
            return self._fail(operation, _snippet(response.text), response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            return self._fail(operation, f"invalid JSON: {exc}", response.status_code)

        try:
            value = parse(payload)
        except ValidationError as exc:
            return self._fail(
                operation,
                f"unexpected response: {exc.error_count()} validation error(s)",
                response.status_code,
            )
        return Success(value)

    def _fail(self, operation: str, message: str, status_code: int | None = None) -> Failure:
        failure = Failure(operation=operation, message=message, status_code=status_code)
        self._logger.error("%s", failure)
        return failure

    async def search_ids(self, query: str) -> Result[list[str]]:
        url = f"{self._server}/search/?{query}&limit=all"
        return await self._request(
            "search",
            "GET",
            url,
            lambda payload: SearchEnvelope.model_validate(payload).ids(),
        )

    async def get_writeable_cart(self, cart_id: str) -> Result[Cart]:
        url = f"{self._server}{cart_id}?frame=edit"
        return await self._request("get_cart", "GET", url, Cart.model_validate)

    async def write_cart(self, cart: Cart) -> Result[list[str]]:
        url = f"{self._server}/carts/{cart.identifier}"
        return await self._request(
            "write_cart",
            "PUT",
            url,
            lambda payload: UpdateEnvelope.model_validate(payload).elements(),
            json=cart.to_payload(),
        )

    async def search_cart(self, cart_id: str) -> Result[list[str]]:
        url = f"{self._server}/cart-search/?cart={cart_id}&limit=all"
        return await self._request(
            "search_cart",
            "GET",
            url,
            lambda payload: SearchEnvelope.model_validate(payload).ids(),
        )
