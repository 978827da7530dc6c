"""Adaptadores concretos de los contratos del Core.

- `HttpxTransport`: transporte HTTP real (httpx).
- `PydanticDecoder`: decoder estructurado por defecto (Pydantic v2).
- `Endpoint`: descriptor host/path/query.
"""

from adapters.endpoint import Endpoint
from adapters.http_client import HttpxTransport, build_async_client
from adapters.pydantic_decoder import PydanticDecoder

__all__ = [
    "Endpoint",
    "HttpxTransport",
    "PydanticDecoder",
    "build_async_client",
]
