"""Superficie de fallos de un decoder estructurado.

Cuatro casos explícitos (tagged variant) en vez de inspeccionar la jerarquía de
excepciones de una librería concreta. Cualquier decoder que se enchufe al
cliente debe reportar exactamente uno de ellos.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

PathItem = Union[str, int]


def dotted(path: tuple[PathItem, ...]) -> str:
    """`("address", "lines", 0)` -> `"address.lines.0"`; la raíz es `""`."""

    return ".".join(str(item) for item in path)


@dataclass(frozen=True)
class MissingField:
    """Falta una clave requerida; `path` localiza el contenedor que la debía tener."""

    key: str
    path: tuple[PathItem, ...] = ()


@dataclass(frozen=True)
class TypeMismatch:
    expected: str
    path: tuple[PathItem, ...] = ()


@dataclass(frozen=True)
class ValueAbsent:
    """Llegó `null` donde la forma exige un valor."""

    expected: str
    path: tuple[PathItem, ...] = ()


@dataclass(frozen=True)
class GenericDecodeFailure:
    message: str
    path: tuple[PathItem, ...] = ()


DecodeFailure = Union[MissingField, TypeMismatch, ValueAbsent, GenericDecodeFailure]


class StructuredDecodeError(Exception):
    """Lo que lanza un decoder estructurado al fallar; transporta un `DecodeFailure`."""

    def __init__(self, failure: DecodeFailure) -> None:
        self.failure = failure
        super().__init__(repr(failure))
