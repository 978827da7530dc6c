"""Modelos y errores del dominio.

Por qué:
- Aquí viven los valores puros del pipeline (métodos, requests, responses).
- El dominio no conoce httpx ni Pydantic: solo conceptos del problema.
"""

from core.domain.decoding import (
    DecodeFailure,
    GenericDecodeFailure,
    MissingField,
    StructuredDecodeError,
    TypeMismatch,
    ValueAbsent,
)
from core.domain.errors import (
    BadRequest,
    DecodingError,
    InvalidStatusCode,
    InvalidURL,
    NetworkError,
)
from core.domain.models import Get, HTTPMethod, Post, TransportRequest, TransportResponse

__all__ = [
    "BadRequest",
    "DecodeFailure",
    "DecodingError",
    "GenericDecodeFailure",
    "Get",
    "HTTPMethod",
    "InvalidStatusCode",
    "InvalidURL",
    "MissingField",
    "NetworkError",
    "Post",
    "StructuredDecodeError",
    "TransportRequest",
    "TransportResponse",
    "TypeMismatch",
    "ValueAbsent",
]
