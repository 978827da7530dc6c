"""Transporte HTTP sobre httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y redirects para todas las llamadas del cliente.
- Implementa `core.interfaces.transport.Transport`: el Core solo ve
  `send(TransportRequest) -> TransportResponse`.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.

Los errores de httpx (timeouts, conexión, TLS) se propagan sin reclasificar.
"""

from __future__ import annotations

import logging
from types import TracebackType

import httpx

from core.config import NetworkSettings
from core.domain.models import TransportRequest, TransportResponse

logger = logging.getLogger(__name__)


def build_async_client(
    settings: NetworkSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las llamadas se comporten igual.
    - `transport` permite sustituir la red real en tests.
    """

    settings = settings or NetworkSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": settings.accept,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=settings.follow_redirects,
        headers=headers,
        transport=transport,
    )


class HttpxTransport:
    """`Transport` respaldado por un `httpx.AsyncClient`.

    Si el cliente se crea aquí, el transporte es su dueño y lo cierra en
    `aclose()` / al salir del `async with`. Un cliente inyectado no se cierra.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        settings: NetworkSettings | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else build_async_client(settings)

    async def send(self, request: TransportRequest) -> TransportResponse:
        logger.debug("%s %s", request.method, request.url)
        response = await self._client.request(
            request.method,
            request.url,
            content=request.body,
        )
        logger.debug("%s %s -> HTTP %s", request.method, request.url, response.status_code)
        return TransportResponse(content=response.content, status_code=response.status_code)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpxTransport:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
