"""Contrato de descriptores de recurso.

Por qué Protocol:
- El Core solo lee `address` y `method`; cómo se calcula la dirección (host,
  path, query) es asunto de la aplicación.
- Cualquier objeto con esos dos atributos sirve, sin herencia.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import HTTPMethod


@runtime_checkable
class ResourceDescriptor(Protocol):
    """Describe qué pedir sin hacer I/O.

    Reglas de diseño:
    - `address` puede ser `None`: es un estado válido (no resoluble), no una excepción.
    - `method` es `Get()` o `Post(data)`.
    """

    @property
    def address(self) -> str | None: ...

    @property
    def method(self) -> HTTPMethod: ...
