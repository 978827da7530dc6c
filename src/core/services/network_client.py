"""Cliente de red genérico y tipado.

Flujo por llamada (lineal, sin reintentos):
1. `build_request(descriptor)`            -> `BadRequest`
2. `await transport.send(request)`        -> fallos del transporte, sin reclasificar
3. `is_success(status)`                   -> `InvalidStatusCode(code)`
4. `PayloadDecoder.decode(body, shape)`   -> `DecodingError(description)`

No guarda estado entre llamadas: llamadas concurrentes son independientes.
"""

from __future__ import annotations

from typing import Any, TypeVar

from core.domain.errors import InvalidStatusCode
from core.interfaces.decoder import StructuredDecoder
from core.interfaces.descriptor import ResourceDescriptor
from core.interfaces.transport import Transport
from core.services.payload_decoder import PayloadDecoder
from core.services.request_builder import build_request
from core.services.response_validator import is_success

T = TypeVar("T")


class NetworkClient:
    """Implementación de `core.interfaces.client.INetworkClient`."""

    def __init__(self, decoder: StructuredDecoder | None = None) -> None:
        if decoder is None:
            from adapters.pydantic_decoder import PydanticDecoder  # noqa: PLC0415

            decoder = PydanticDecoder()
        self._payload_decoder = PayloadDecoder(decoder)

    async def request(
        self,
        transport: Transport,
        descriptor: ResourceDescriptor,
        shape: type[T] | Any,
    ) -> T:
        request = build_request(descriptor)
        response = await transport.send(request)

        if not is_success(response.status_code):
            raise InvalidStatusCode(response.status_code)

        return self._payload_decoder.decode(response.content, shape)
