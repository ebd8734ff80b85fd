"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los defaults de la CLI (keyfile, key, query) salen de un único contrato.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_QUERY = "type=Experiment&status=released&perturbed=false&assay_title=siRNA+RNA-seq"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "cart-search-check"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "cart-search-check"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "cart-search-check"
    return Path.home() / ".config" / "cart-search-check"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="CART_SEARCH_CHECK_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). None usa el default de httpx.",
    )
    user_agent: str = Field(
        default="cart-search-check/1.0.0",
        min_length=1,
        description="User-Agent para las peticiones al portal.",
    )

    default_keyfile: Path = Field(
        default=Path("keypairs.json"),
        description="Ruta del keyfile JSON con servidores y credenciales.",
    )
    default_key: str = Field(
        default="localhost",
        min_length=1,
        description="Entrada del keyfile usada si no se indica --key.",
    )
    default_query: str = Field(
        default=DEFAULT_QUERY,
        min_length=1,
        description="Query string de búsqueda (sin '?' inicial).",
    )

    log_level: str = Field(
        default="INFO",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )
