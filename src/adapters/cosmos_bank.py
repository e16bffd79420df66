"""Fuente de balances: módulo bank de Cosmos SDK (REST/LCD).

Endpoint:
- `GET {rest_base}/cosmos/bank/v1beta1/balances/{address}/by_denom?denom=...`
- 200 => `{"balance": {"denom": "...", "amount": "<int>"}}`

Notas:
- Un único intento por dirección. Cualquier cosa distinta de un 2xx bien
  formado se registra en el log y se reporta como `"0"`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.interfaces.balance_source import BalanceSource

logger = logging.getLogger(__name__)

ZERO_AMOUNT = "0"


def balance_by_denom_url(rest_base: str, address: str) -> str:
    return f"{rest_base.rstrip('/')}/cosmos/bank/v1beta1/balances/{address}/by_denom"


def _extract_amount(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None
    balance = payload.get("balance")
    if not isinstance(balance, dict):
        return None
    amount = balance.get("amount")
    if isinstance(amount, str):
        return amount
    if isinstance(amount, int) and not isinstance(amount, bool):
        return str(amount)
    return None


class CosmosBankBalanceSource(BalanceSource):
    """Lee el balance de un denom por dirección desde un endpoint REST de Cosmos.

    Si se pasa `client`, se comparte entre llamadas (y lo cierra quien lo
    creó); si no, cada llamada abre su propio cliente.
    """

    def __init__(
        self,
        rest_base: str,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._rest_base = rest_base
        self._settings = settings or AppSettings()
        self._client = client

    async def fetch_amount(self, address: str, denom: str) -> str:
        url = balance_by_denom_url(self._rest_base, address)
        try:
            if self._client is not None:
                response = await self._client.get(url, params={"denom": denom})
            else:
                async with build_async_client(self._settings) as client:
                    response = await client.get(url, params={"denom": denom})
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            logger.warning("balance query for %s failed: HTTP %s", address, exc.response.status_code)
            return ZERO_AMOUNT
        except Exception as exc:
            logger.warning("balance query for %s failed: %s", address, exc)
            return ZERO_AMOUNT

        amount = _extract_amount(payload)
        if amount is None:
            logger.warning("balance query for %s returned no balance.amount", address)
            return ZERO_AMOUNT
        return amount
