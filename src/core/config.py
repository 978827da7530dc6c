"""Configuración del transporte HTTP.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar el pipeline.
- El Core no lee estos valores: solo los adaptadores (transporte httpx, logging).
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "netlayer"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "netlayer"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "netlayer"
    return Path.home() / ".config" / "netlayer"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class NetworkSettings(BaseSettings):
    """Configuración del transporte y del logging.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars).
    - Un único contrato de configuración para todos los adaptadores.
    """

    model_config = SettingsConfigDict(
        env_prefix="NETLAYER_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="netlayer/0.1",
        min_length=1,
        description="User-Agent enviado en cada request.",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Seguir redirects en el transporte httpx.",
    )
    accept: str = Field(
        default="application/json",
        min_length=1,
        description="Header Accept por defecto.",
    )

    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel del logger raíz (DEBUG, INFO, WARNING...).",
    )
    log_format: Literal["rich", "plain"] = Field(
        default="rich",
        description="`rich` usa RichHandler; `plain` un StreamHandler con timestamp.",
    )
