"""Servicios del Core: construir, validar, decodificar y orquestar."""

from core.services.network_client import NetworkClient
from core.services.payload_decoder import PayloadDecoder, describe_failure
from core.services.request_builder import build_request
from core.services.response_validator import is_success

__all__ = [
    "NetworkClient",
    "PayloadDecoder",
    "build_request",
    "describe_failure",
    "is_success",
]
