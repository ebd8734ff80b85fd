"""Envelopes JSON-LD devueltos por el portal.

Solo se modelan los campos que se leen; el resto se ignora.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class GraphItem(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(..., alias="@id")


class SearchEnvelope(BaseModel):
    """Respuesta de `/search/` y `/cart-search/`."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    graph: list[GraphItem] = Field(..., alias="@graph")

    def ids(self) -> list[str]:
        return [item.id for item in self.graph]


class UpdatedCart(BaseModel):
    model_config = ConfigDict(extra="ignore")

    elements: list[str]


class UpdateEnvelope(BaseModel):
    """Respuesta del PUT `/carts/<identifier>`."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    graph: list[UpdatedCart] = Field(..., alias="@graph", min_length=1)

    def elements(self) -> list[str]:
        return self.graph[0].elements

