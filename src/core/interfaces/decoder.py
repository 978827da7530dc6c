"""Contrato del decoder estructurado."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class StructuredDecoder(Protocol):
    """Decodifica bytes a una forma `shape`.

    Reglas de diseño:
    - Ante cualquier fallo lanza `core.domain.decoding.StructuredDecodeError`
      con uno de los cuatro casos de `DecodeFailure`.
    - Si guarda estado, cada llamada concurrente necesita su propia instancia.
    """

    def decode(self, data: bytes, shape: type[T] | Any) -> T: ...
