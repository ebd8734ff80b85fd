"""Tipo resultado para las llamadas al portal.

Por qué:
- Un fallo HTTP no debe lanzarse ni convertirse en `None`: el orquestador
  decide qué hacer viendo si recibió `Success` o `Failure`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Fallo de una operación (HTTP no-2xx, error de transporte o de parseo)."""

    operation: str
    message: str
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return False

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.operation}: HTTP {self.status_code} {self.message}"
        return f"{self.operation}: {self.message}"


Result = Union[Success[T], Failure]
