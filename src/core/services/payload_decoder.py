"""Decodificación del payload con errores normalizados.

Por qué un wrapper:
- El decoder estructurado (Pydantic por defecto) reporta cuatro casos de fallo
  con su path; aquí se traducen a un único `DecodingError(description)` estable.
- El cliente no depende de la jerarquía de excepciones de ninguna librería.
"""

from __future__ import annotations

from types import UnionType
from typing import Annotated, Any, Literal, TypeVar, Union, get_args, get_origin

from core.domain.decoding import (
    DecodeFailure,
    GenericDecodeFailure,
    MissingField,
    StructuredDecodeError,
    TypeMismatch,
    ValueAbsent,
    dotted,
)
from core.domain.errors import DecodingError
from core.interfaces.decoder import StructuredDecoder

T = TypeVar("T")


def shape_name(shape: Any) -> str:
    """Nombre legible de la forma destino (`User`, `list[User]`, ...)."""

    if shape is None or shape is type(None):
        return "None"
    if shape is Ellipsis:
        return "..."

    origin = get_origin(shape)
    if origin is None:
        if isinstance(shape, type):
            return shape.__name__
        return str(shape).replace("typing.", "")

    args = get_args(shape)
    if origin is Union or origin is UnionType:
        return " | ".join(shape_name(arg) for arg in args)
    if origin is Annotated:
        return shape_name(args[0])
    if origin is Literal:
        return f"Literal[{', '.join(repr(arg) for arg in args)}]"

    origin_name = getattr(origin, "__name__", None) or str(origin).replace("typing.", "")
    if not args:
        return origin_name
    return f"{origin_name}[{', '.join(shape_name(arg) for arg in args)}]"


def describe_failure(failure: DecodeFailure, shape: Any) -> str:
    name = shape_name(shape)
    if isinstance(failure, MissingField):
        return f"Missing key '{failure.key}' in {name} at path: {dotted(failure.path)}"
    if isinstance(failure, TypeMismatch):
        return f"Type mismatch for type {failure.expected} in {name} at path: {dotted(failure.path)}"
    if isinstance(failure, ValueAbsent):
        return f"Value not found for type {failure.expected} in {name} at path: {dotted(failure.path)}"
    if isinstance(failure, GenericDecodeFailure):
        return f"Failed to decode {name}: {failure.message}"
    raise TypeError(f"Unknown decode failure: {failure!r}")


class PayloadDecoder:
    """Envuelve un `StructuredDecoder` y normaliza sus fallos."""

    def __init__(self, decoder: StructuredDecoder) -> None:
        self._decoder = decoder

    def decode(self, data: bytes, shape: type[T] | Any) -> T:
        try:
            return self._decoder.decode(data, shape)
        except StructuredDecodeError as exc:
            raise DecodingError(describe_failure(exc.failure, shape)) from None
