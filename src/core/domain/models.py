"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Permite serializar el reporte final a JSON sin código extra.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, Field, RootModel, field_validator
from pydantic.config import ConfigDict

from core.domain.enums import CheckStage, SearchType


class KeypairEntry(BaseModel):
    """Una entrada del keyfile: servidor + credenciales de acceso."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    server: str = Field(
        ...,
        min_length=1,
        description="URL base del servidor (sin barra final).",
    )
    key: str = Field(
        ...,
        description="Access key asignada en el portal.",
    )
    secret: str = Field(
        ...,
        description="Secret asociado a la access key.",
    )

    @field_validator("server")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class Keyfile(RootModel[dict[str, KeypairEntry]]):
    """Contenido completo del keyfile: nombre de entorno -> `KeypairEntry`."""

    def names(self) -> list[str]:
        return sorted(self.root)


class Cart(BaseModel):
    """Cart en su frame editable.

    Por qué `extra="allow"`:
    - El servidor devuelve campos propios (status, submitted_by, ...) que hay
      que reenviar intactos en el PUT.
    """

    model_config = ConfigDict(extra="allow")

    identifier: str = Field(
        ...,
        min_length=1,
        description="Identificador usado en `/carts/<identifier>`.",
    )
    elements: list[str] = Field(
        default_factory=list,
        description="@ids de los objetos que contiene el cart.",
    )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


Differences = list[str] | Literal[False]


class CheckFailure(BaseModel):
    """Fallo de red/parseo registrado en el reporte."""

    operation: str
    message: str
    status_code: int | None = None


class CartCheckReport(BaseModel):
    """Resultado de una ejecución completa de la verificación."""

    key: str = Field(..., description="Entrada del keyfile utilizada.")
    server: str = Field(..., description="Servidor contra el que se ejecutó.")
    cart: str = Field(..., description="@id del cart verificado.")
    query: str = Field(..., description="Query string de la búsqueda inicial.")
    search_type: SearchType = Field(default=SearchType.SEARCH)

    search_ids: list[str] = Field(
        default_factory=list,
        description="@ids devueltos por `/search/`.",
    )
    cart_elements: list[str] = Field(
        default_factory=list,
        description="Elements confirmados por el servidor tras el PUT.",
    )
    cart_search_ids: list[str] = Field(
        default_factory=list,
        description="@ids devueltos por `/cart-search/`.",
    )
    differences: Differences | None = Field(
        default=None,
        description="False si los tamaños difieren; lista (posiblemente vacía) si no; None si no se comparó.",
    )

    stage: CheckStage = Field(default=CheckStage.LOADING_CREDENTIALS)
    failure: CheckFailure | None = None
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def completed(self) -> bool:
        return self.stage is CheckStage.DONE and self.failure is None

    @property
    def consistent(self) -> bool:
        return self.completed and self.differences == []
