"""Contrato del transporte de bytes.

El Core no gestiona conexiones, TLS, redirects ni timeouts: delega todo en un
objeto con `send`. Sus fallos se propagan tal cual.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import TransportRequest, TransportResponse


@runtime_checkable
class Transport(Protocol):
    async def send(self, request: TransportRequest) -> TransportResponse:
        """Envía `request` y devuelve bytes + status."""

        ...
