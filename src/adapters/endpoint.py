"""Descriptor concreto: host + path + query.

Implementa `core.interfaces.descriptor.ResourceDescriptor` calculando `address`
con `httpx.URL`. Reglas:
- host vacío -> `address is None` (no resoluble; el cliente responde `BadRequest`).
- path no vacío que no empieza por `/` -> `address is None`.
- host que httpx rechaza -> `InvalidURL` al leer `address`.
- query en orden de inserción; `None` o `{}` no añaden `?`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

import httpx

from core.domain.errors import InvalidURL
from core.domain.models import Get, HTTPMethod


@dataclass(frozen=True)
class Endpoint:
    host: str
    path: str = ""
    method: HTTPMethod = field(default_factory=Get)
    query_items: Mapping[str, str] | None = None
    scheme: str = "https"

    @property
    def address(self) -> str | None:
        if not self.host:
            return None
        if self.path and not self.path.startswith("/"):
            return None

        kwargs: dict[str, object] = {"scheme": self.scheme, "host": self.host, "path": self.path}
        if self.query_items:
            kwargs["params"] = dict(self.query_items)
        try:
            url = httpx.URL(**kwargs)  # type: ignore[arg-type]
        except httpx.InvalidURL as exc:
            raise InvalidURL() from exc
        return str(url)
