"""Decoder estructurado basado en Pydantic v2.

Responsabilidad:
- Validar bytes JSON contra una forma (`BaseModel`, `list[Model]`, TypedDict...)
  con `TypeAdapter.validate_json`.
- Traducir el primer error de `ValidationError` a uno de los cuatro casos de
  `core.domain.decoding.DecodeFailure`, con su path.

Mapeo:
- `missing`                          -> MissingField(key, path del contenedor)
- input `None` en cualquier otro error -> ValueAbsent(tipo esperado, path)
- `*_type` / `*_parsing`             -> TypeMismatch(tipo esperado, path)
- resto (`json_invalid`, constraints) -> GenericDecodeFailure(msg de Pydantic)
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import ErrorDetails, from_json

from core.domain.decoding import (
    DecodeFailure,
    GenericDecodeFailure,
    MissingField,
    PathItem,
    StructuredDecodeError,
    TypeMismatch,
    ValueAbsent,
)

T = TypeVar("T")

_TYPE_SUFFIXES = ("_type", "_parsing")

# Nombres de Pydantic -> nombres de Python.
_PYTHON_NAMES = {
    "string": "str",
    "bytes": "bytes",
    "int": "int",
    "float": "float",
    "bool": "bool",
    "list": "list",
    "tuple": "tuple",
    "set": "set",
    "frozen_set": "frozenset",
    "dict": "dict",
    "datetime": "datetime",
    "date": "date",
    "time": "time",
    "uuid": "UUID",
    "decimal": "Decimal",
}


def _expected_type(error: ErrorDetails) -> str:
    ctx = error.get("ctx") or {}
    class_name = ctx.get("class_name")
    if isinstance(class_name, str):
        return class_name

    kind = error["type"]
    for suffix in _TYPE_SUFFIXES:
        if kind.endswith(suffix):
            kind = kind[: -len(suffix)]
            break
    return _PYTHON_NAMES.get(kind, kind)


def field_path(document: Any, loc: tuple[PathItem, ...]) -> tuple[PathItem, ...]:
    """Filtra `loc` dejando solo claves/índices reales del documento.

    `loc` de Pydantic incluye tags de miembros de unions (`'int'`, `'str'`,
    discriminadores) que no existen en el JSON; esos segmentos se descartan.
    """

    path: list[PathItem] = []
    current = document
    for item in loc:
        if isinstance(current, dict) and isinstance(item, str) and item in current:
            current = current[item]
        elif isinstance(current, list) and isinstance(item, int) and 0 <= item < len(current):
            current = current[item]
        else:
            continue
        path.append(item)
    return tuple(path)


def failure_from_error(error: ErrorDetails, document: Any) -> DecodeFailure:
    """Clasifica un error de Pydantic en uno de los cuatro casos.

    `document` es el JSON ya parseado; con él se reconstruye el path de campos.
    """

    kind = error["type"]
    loc = tuple(error["loc"])

    if kind == "missing" and loc:
        return MissingField(key=str(loc[-1]), path=field_path(document, loc[:-1]))
    path = field_path(document, loc)
    if kind != "json_invalid" and error.get("input", ...) is None:
        return ValueAbsent(expected=_expected_type(error), path=path)
    if kind.endswith(_TYPE_SUFFIXES):
        return TypeMismatch(expected=_expected_type(error), path=path)
    return GenericDecodeFailure(message=error["msg"], path=path)


class PydanticDecoder:
    """`StructuredDecoder` por defecto del cliente.

    Sin estado más allá de la caché de `TypeAdapter` por forma, que es segura de
    compartir entre llamadas concurrentes (asyncio, un solo hilo).
    """

    def __init__(self, *, strict: bool | None = None) -> None:
        self._strict = strict
        self._adapters: dict[Any, TypeAdapter[Any]] = {}

    def _adapter(self, shape: Any) -> TypeAdapter[Any]:
        adapter = self._adapters.get(shape)
        if adapter is None:
            adapter = TypeAdapter(shape)
            self._adapters[shape] = adapter
        return adapter

    def decode(self, data: bytes, shape: type[T] | Any) -> T:
        adapter = self._adapter(shape)
        try:
            return adapter.validate_json(data, strict=self._strict)
        except ValidationError as exc:
            errors = exc.errors(include_url=False)
            if not errors:
                raise StructuredDecodeError(GenericDecodeFailure(message=str(exc))) from exc
            try:
                document = from_json(data)
            except ValueError:
                document = None
            raise StructuredDecodeError(failure_from_error(errors[0], document)) from exc
