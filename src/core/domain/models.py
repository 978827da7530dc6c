"""Modelos del dominio del pipeline HTTP.

Por qué dataclasses congeladas (y no Pydantic) aquí:
- Son valores de transporte que viven una sola llamada: inmutables y comparables.
- El body de un POST debe llegar al transporte como *el mismo* objeto `bytes`
  que trae el descriptor; una validación Pydantic podría copiarlo.

Nota:
- La forma de la respuesta (`shape`) sí suele ser un modelo Pydantic; eso lo
  resuelve el decoder, no estos modelos.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union


@dataclass(frozen=True)
class Get:
    """Método GET: nunca lleva body."""

    name: ClassVar[str] = "GET"


@dataclass(frozen=True)
class Post:
    """Método POST con payload opcional (bytes crudos)."""

    name: ClassVar[str] = "POST"

    data: bytes | None = None


HTTPMethod = Union[Get, Post]


@dataclass(frozen=True)
class TransportRequest:
    """Request ya resuelto que se entrega al transporte.

    Se construye una vez por llamada y pertenece solo a esa llamada.
    """

    url: str
    method: str
    body: bytes | None = field(default=None, repr=False)


@dataclass(frozen=True)
class TransportResponse:
    """Bytes crudos + status devueltos por el transporte."""

    content: bytes = field(repr=False)
    status_code: int
