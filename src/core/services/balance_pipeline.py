"""Balance aggregation pipeline.

This module owns the whole request flow: normalize parameters, fan out one
balance lookup per address, format amounts and apply threshold alerts. The
CLI and the request handler both delegate here, which keeps side-effects
(printing, status codes) out of the core logic.
"""

from __future__ import annotations

import asyncio
import logging
import math
from typing import Mapping

from adapters.cosmos_bank import ZERO_AMOUNT, CosmosBankBalanceSource
from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import QueryItem, RequestConfig, ResultMeta, ResultRow, ResultSet
from core.domain.units import format_units, to_bigint_safe
from core.errors import InternalError
from core.interfaces.balance_source import BalanceSource
from core.services.params import QueryValue, normalize_query

logger = logging.getLogger(__name__)


def evaluate_alert(balance_formatted: str, threshold: float | None) -> bool | None:
    """True when the balance is strictly below `threshold`.

    None when there is no threshold or the balance is not a finite number.
    The comparison runs on the truncated display value as a float.
    """

    if threshold is None or not math.isfinite(threshold):
        return None
    try:
        balance = float(balance_formatted)
    except ValueError:
        return None
    if not math.isfinite(balance):
        return None
    return balance < threshold


def build_row(
    item: QueryItem,
    amount: str,
    *,
    decimals: int,
    max_fraction: int,
) -> ResultRow:
    value = to_bigint_safe(amount)
    try:
        raw = str(value)
        formatted = format_units(value, decimals, max_fraction)
    except ValueError as exc:
        logger.warning("amount for %s cannot be rendered, using 0: %s", item.address, exc)
        raw = formatted = ZERO_AMOUNT
    if raw != amount.strip():
        logger.debug("amount %r for %s is not a plain integer, using %s", amount[:64], item.address, raw)
    return ResultRow(
        account=item.name,
        address=item.address,
        balance_raw=raw,
        balance_formatted=formatted,
        threshold=item.threshold,
        alert=evaluate_alert(formatted, item.threshold),
    )


async def _safe_fetch(source: BalanceSource, item: QueryItem, denom: str) -> str:
    try:
        amount = await source.fetch_amount(item.address, denom)
    except Exception as exc:
        logger.warning("balance source failed for %s: %s", item.address, exc)
        return ZERO_AMOUNT
    return amount if isinstance(amount, str) else ZERO_AMOUNT


async def collect_rows(
    *,
    items: list[QueryItem],
    config: RequestConfig,
    source: BalanceSource,
    max_fraction: int,
) -> list[ResultRow]:
    """Fetch every item concurrently and build rows in input order."""

    amounts = await asyncio.gather(*(_safe_fetch(source, item, config.denom) for item in items))
    return [
        build_row(item, amount, decimals=config.decimals, max_fraction=max_fraction)
        for item, amount in zip(items, amounts)
    ]


async def aggregate_balances(
    *,
    query: Mapping[str, QueryValue],
    settings: AppSettings | None = None,
    source: BalanceSource | None = None,
) -> ResultSet:
    """Run the full pipeline for one request.

    Raises:
    - `ValidationError` when `addresses` is missing (no network calls).
    - `InternalError` for anything unexpected while assembling the result.
    """

    settings = settings or AppSettings()
    items, config = normalize_query(query, settings)

    try:
        if source is not None:
            rows = await collect_rows(
                items=items,
                config=config,
                source=source,
                max_fraction=settings.max_fraction_digits,
            )
        else:
            async with build_async_client(settings) as client:
                rows = await collect_rows(
                    items=items,
                    config=config,
                    source=CosmosBankBalanceSource(config.rest_base, settings, client=client),
                    max_fraction=settings.max_fraction_digits,
                )

        meta = ResultMeta(denom=config.denom, rest_base=config.rest_base, divisor=config.divisor)
        result = ResultSet(rows=rows, meta=meta)
    except Exception as exc:
        logger.exception("balances aggregation failed")
        raise InternalError(str(exc) or "internal error") from exc

    alerts = sum(1 for row in result.rows if row.alert)
    logger.debug("aggregated %d balances for %s (%d alerts)", len(result.rows), config.denom, alerts)
    return result
