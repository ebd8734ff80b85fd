"""Orquestación de la verificación cart vs cart-search.

Secuencia (estrictamente en orden, una petición en vuelo cada vez):
credenciales -> search -> cart editable -> PUT del cart -> cart-search -> comparación.

Un `Failure` en cualquier llamada al portal corta la ejecución: el reporte
guarda la etapa alcanzada y el fallo, y no se ejecuta ningún paso posterior.
Los errores de configuración (keyfile, key, cart) se lanzan como
`CartCheckError` antes de tocar la red.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import AsyncContextManager, Callable

from adapters.keyfile_loader import load_keypair
from adapters.portal_client import PortalClient
from core.auth import auth_from_keypair
from core.comparison import compare_carts
from core.config import AppSettings
from core.domain.enums import CheckStage, SearchType
from core.domain.models import CartCheckReport, CheckFailure
from core.domain.results import Failure
from core.errors import ConfigError
from core.interfaces.portal import CartPortal
from core.logger import get_logger

PortalFactory = Callable[[str, str], AsyncContextManager[CartPortal]]


@dataclass(frozen=True)
class CheckRequest:
    """Parámetros de una ejecución (construidos una vez por la CLI)."""

    cart: str | None
    key: str = "localhost"
    keyfile: Path = Path("keypairs.json")
    query: str = ""
    search_type: SearchType = SearchType.SEARCH
    debug: bool = False


@dataclass
class PipelineHooks:
    """Callbacks opcionales para la UI (progreso)."""

    stage: Callable[[CheckStage], None] | None = None


@dataclass
class _Run:
    report: CartCheckReport
    logger: logging.Logger
    hooks: PipelineHooks = field(default_factory=PipelineHooks)

    def enter(self, stage: CheckStage) -> None:
        self.report.stage = stage
        self.logger.info("stage: %s", stage.label())
        if self.hooks.stage is not None:
            self.hooks.stage(stage)

    def abort(self, failure: Failure) -> CartCheckReport:
        self.report.failure = CheckFailure(
            operation=failure.operation,
            message=failure.message,
            status_code=failure.status_code,
        )
        self.logger.error("aborted during %s", self.report.stage.label())
        return self.report


async def run_cart_check(
    request: CheckRequest,
    *,
    settings: AppSettings | None = None,
    portal_factory: PortalFactory | None = None,
    hooks: PipelineHooks | None = None,
    logger: logging.Logger | None = None,
) -> CartCheckReport:
    """Ejecuta la verificación completa y devuelve el `CartCheckReport`."""

    settings = settings or AppSettings()
    logger = logger or get_logger("cart_check")
    hooks = hooks or PipelineHooks()

    if not request.cart:
        raise ConfigError("no cart @id given (use --cart)")

    if hooks.stage is not None:
        hooks.stage(CheckStage.LOADING_CREDENTIALS)
    entry = load_keypair(request.keyfile, request.key)
    auth = auth_from_keypair(entry)
    if request.search_type is not SearchType.SEARCH:
        logger.debug("search type %s is accepted but not used yet", request.search_type.value)

    run = _Run(
        report=CartCheckReport(
            key=request.key,
            server=entry.server,
            cart=request.cart,
            query=request.query,
            search_type=request.search_type,
        ),
        logger=logger,
        hooks=hooks,
    )

    def _default_factory(server: str, auth: str) -> AsyncContextManager[CartPortal]:
        return PortalClient(server, auth, settings=settings, logger=logger)

    factory = portal_factory or _default_factory
    async with factory(entry.server, auth) as portal:
        run.enter(CheckStage.SEARCHING)
        searched = await portal.search_ids(request.query)
        if isinstance(searched, Failure):
            return run.abort(searched)
        run.report.search_ids = searched.value
        logger.info("search returned %d item(s)", len(searched.value))

        run.enter(CheckStage.READING_CART)
        fetched = await portal.get_writeable_cart(request.cart)
        if isinstance(fetched, Failure):
            return run.abort(fetched)
        cart = fetched.value
        cart.elements = list(searched.value)

        run.enter(CheckStage.WRITING_CART)
        written = await portal.write_cart(cart)
        if isinstance(written, Failure):
            return run.abort(written)
        run.report.cart_elements = written.value

        run.enter(CheckStage.SEARCHING_CART)
        cart_searched = await portal.search_cart(request.cart)
        if isinstance(cart_searched, Failure):
            return run.abort(cart_searched)
        run.report.cart_search_ids = cart_searched.value

    run.enter(CheckStage.COMPARING)
    run.report.differences = compare_carts(run.report.cart_elements, run.report.cart_search_ids)
    run.enter(CheckStage.DONE)
    return run.report
