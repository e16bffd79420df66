"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP, handler) lean los mismos defaults.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DENOM = "peaka"
DEFAULT_REST_BASE = "https://vota-rest.dorafactory.org"
DEFAULT_DIVISOR = "1000000000000000000"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars, `.env`) con prefijo
      `VOTA_BALANCES_`.
    - Los parámetros de la petición siempre ganan a los `default_*`.
    """

    model_config = SettingsConfigDict(
        env_prefix="VOTA_BALANCES_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    default_denom: str = Field(
        default=DEFAULT_DENOM,
        min_length=1,
        description="Denominación consultada si la petición no indica una.",
    )
    default_rest_base: str = Field(
        default=DEFAULT_REST_BASE,
        min_length=8,
        description="Base URL del endpoint REST (LCD) de Cosmos.",
    )
    default_divisor: str = Field(
        default=DEFAULT_DIVISOR,
        min_length=1,
        description="Divisor (10^decimales) para escalar unidades base.",
    )
    max_fraction_digits: int = Field(
        default=6,
        ge=0,
        le=36,
        description="Máximo de dígitos fraccionarios en balances formateados.",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="vota-balances/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para peticiones al endpoint REST.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de log raíz usado por la CLI.",
    )
