"""Superficie pública del cliente de red."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

from core.interfaces.descriptor import ResourceDescriptor
from core.interfaces.transport import Transport

T = TypeVar("T")


@runtime_checkable
class INetworkClient(Protocol):
    async def request(
        self,
        transport: Transport,
        descriptor: ResourceDescriptor,
        shape: type[T] | Any,
    ) -> T:
        """Devuelve el valor decodificado o lanza `core.domain.errors.NetworkError`."""

        ...
