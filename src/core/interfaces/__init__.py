"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from core.interfaces.client import INetworkClient
from core.interfaces.decoder import StructuredDecoder
from core.interfaces.descriptor import ResourceDescriptor
from core.interfaces.transport import Transport

__all__ = [
    "INetworkClient",
    "ResourceDescriptor",
    "StructuredDecoder",
    "Transport",
]
