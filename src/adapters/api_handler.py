"""Framework-agnostic balances endpoint.

Maps one `GET` request (query-string mapping) to a status code and a JSON
body. Any web framework can mount it: parse the query, call
`handle_balances_request`, serialize `response.body`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from core.config import AppSettings
from core.errors import BalancesError
from core.interfaces.balance_source import BalanceSource
from core.services.balance_pipeline import aggregate_balances
from core.services.params import QueryValue

logger = logging.getLogger(__name__)

METHOD_NOT_ALLOWED = "Method not allowed"


@dataclass
class BalancesResponse:
    """Status code plus JSON-ready body."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


async def handle_balances_request(
    method: str,
    query: Mapping[str, QueryValue],
    *,
    settings: AppSettings | None = None,
    source: BalanceSource | None = None,
) -> BalancesResponse:
    if method.upper() != "GET":
        return BalancesResponse(status_code=405, body={"error": METHOD_NOT_ALLOWED})

    try:
        result = await aggregate_balances(query=query, settings=settings, source=source)
    except BalancesError as exc:
        logger.info("balances request rejected (%s): %s", exc.status_code, exc.message)
        return BalancesResponse(status_code=exc.status_code, body=exc.to_payload())

    return BalancesResponse(status_code=200, body=result.to_payload())
