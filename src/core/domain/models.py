"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los alias dan el formato camelCase del JSON sin ensuciar el código Python.

Nota:
- Estos modelos describen *qué* es un reporte de balances, no *cómo* se obtiene.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_serializer
from pydantic.config import ConfigDict


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class QueryItem(BaseModel):
    """Una dirección a consultar, alineada con su nombre y su umbral."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        description="Nombre visible; por defecto la propia dirección.",
    )
    address: str = Field(
        ...,
        min_length=1,
        description="Dirección de la cuenta (bech32) tal como llega.",
    )
    threshold: float | None = Field(
        default=None,
        description="Umbral de alerta en unidades visibles (solo si es finito).",
    )


class RequestConfig(BaseModel):
    """Configuración efectiva de la petición, con defaults aplicados."""

    denom: str = Field(..., min_length=1, description="Denominación consultada.")
    rest_base: str = Field(..., min_length=1, description="Base URL REST.")
    divisor: str = Field(
        ...,
        min_length=1,
        description="Divisor tal como se recibió (10^decimales).",
    )
    decimals: int = Field(
        ...,
        description="Decimales derivados de `divisor`.",
    )


class ResultRow(BaseModel):
    """Balance de una cuenta, en el orden de la petición."""

    model_config = ConfigDict(populate_by_name=True)

    account: str = Field(..., description="Nombre visible de la cuenta.")
    address: str = Field(..., description="Dirección consultada.")
    balance_raw: str = Field(
        default="0",
        alias="balanceRaw",
        pattern=r"^[0-9]+$",
        description="Balance en unidades base (entero en base 10, como texto).",
    )
    balance_formatted: str = Field(
        default="0",
        alias="balanceFormatted",
        description="Balance escalado por el divisor, truncado.",
    )
    threshold: float | None = Field(
        default=None,
        description="Umbral de alerta (solo si se indicó).",
    )
    alert: bool | None = Field(
        default=None,
        description="True si el balance formateado está por debajo del umbral.",
    )

    @field_serializer("threshold")
    def serialize_threshold(self, value: float | None) -> int | float | None:
        # Enteros salen como `5`, no `5.0`.
        if value is not None and value.is_integer() and abs(value) < 2**53:
            return int(value)
        return value


class ResultMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    denom: str
    rest_base: str = Field(..., alias="restBase")
    divisor: str
    updated_at: datetime = Field(
        default_factory=_utcnow,
        alias="updatedAt",
        description="Momento de captura del resultado (UTC).",
    )


class ResultSet(BaseModel):
    """Respuesta completa de una petición de balances."""

    rows: list[ResultRow] = Field(default_factory=list)
    meta: ResultMeta

    def to_payload(self) -> dict[str, object]:
        """Dict listo para JSON, con nombres camelCase y sin opcionales ausentes."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
