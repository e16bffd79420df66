"""Contrato de fuentes de balance.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite probar el agregador con un fake en memoria y sustituir el
  adaptador REST de Cosmos.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class BalanceSource(Protocol):
    """Contrato mínimo para consultar el balance de una dirección.

    Reglas de diseño:
    - `fetch_amount` es asíncrono porque hace I/O (HTTP).
    - Devuelve el monto en unidades base como texto y nunca lanza:
      cualquier fallo degrada a `"0"`.
    """

    async def fetch_amount(self, address: str, denom: str) -> str:
        """Devuelve el balance en unidades base de `address` para `denom`."""

        ...
