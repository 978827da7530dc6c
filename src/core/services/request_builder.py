"""Construcción del request de transporte a partir de un descriptor."""

from __future__ import annotations

from core.domain.errors import BadRequest
from core.domain.models import Get, Post, TransportRequest
from core.interfaces.descriptor import ResourceDescriptor


def build_request(descriptor: ResourceDescriptor) -> TransportRequest:
    """Traduce `descriptor` a un `TransportRequest`.

    - Sin `address` -> `BadRequest`.
    - GET nunca lleva body; POST lleva exactamente el payload del descriptor
      (el mismo objeto, incluido `None`). El builder no inventa bodies.
    """

    address = descriptor.address
    if address is None:
        raise BadRequest()

    method = descriptor.method
    body: bytes | None = None
    if isinstance(method, Post):
        body = method.data
    elif not isinstance(method, Get):
        raise TypeError(f"Unsupported HTTP method variant: {method!r}")

    return TransportRequest(url=address, method=method.name, body=body)
