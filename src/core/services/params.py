"""Request parameter normalization.

Turns query-string style values into the aligned `QueryItem` sequence and
the effective `RequestConfig`. Auxiliary lists (names, thresholds) are
allowed to be shorter than the address list; missing positions are simply
absent.
"""

from __future__ import annotations

import math
import re
from typing import Mapping, Sequence

from core.config import AppSettings
from core.domain.models import QueryItem, RequestConfig
from core.errors import ValidationError

ADDRESSES_REQUIRED = "addresses is required (comma-separated)"
FALLBACK_DECIMALS = 18

_POWER_OF_TEN_RE = re.compile(r"10+")
_RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}

QueryValue = str | Sequence[str] | None


def parse_csv_param(value: QueryValue) -> list[str]:
    """Split a comma-separated value (or repeated values) into clean tokens."""

    if not value:
        return []
    joined = value if isinstance(value, str) else ",".join(value)
    return [token.strip() for token in joined.split(",") if token.strip()]


def parse_number(token: str) -> float | None:
    """Finite float for `token`, or None.

    Accepts decimals, exponents and unsigned `0x`/`0o`/`0b` integer literals.
    """

    # float() accepts digit separators and non-ASCII digits; query numbers never carry them.
    if "_" in token or not token.isascii():
        return None
    text = token.strip()
    radix = _RADIX_PREFIXES.get(text[:2].lower())
    if radix is not None:
        digits = text[2:]
        if not digits.isalnum():
            return None
        try:
            number = float(int(digits, radix))
        except (ValueError, OverflowError):
            return None
        return number if math.isfinite(number) else None
    try:
        number = float(token)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def derive_decimals(divisor: str) -> int:
    """Decimal places implied by `divisor` (a string for 10^decimals).

    `1` followed by N zeros gives N. Otherwise log10 of the numeric value
    is used when it lands on an integer; anything else falls back to 18.
    """

    text = str(divisor)
    if _POWER_OF_TEN_RE.fullmatch(text):
        return len(text) - 1

    try:
        log = math.log10(float(text))
    except (ValueError, OverflowError):
        return FALLBACK_DECIMALS
    if math.isfinite(log) and abs(log - round(log)) < 1e-9:
        return round(log)
    return FALLBACK_DECIMALS


def build_query_items(
    addresses: Sequence[str],
    names: Sequence[str] = (),
    thresholds: Sequence[str] = (),
) -> list[QueryItem]:
    """Align names and thresholds with addresses by position."""

    if not addresses:
        raise ValidationError(ADDRESSES_REQUIRED)

    items: list[QueryItem] = []
    for i, address in enumerate(addresses):
        name = names[i] if i < len(names) else address
        threshold = parse_number(thresholds[i]) if i < len(thresholds) else None
        items.append(QueryItem(name=name, address=address, threshold=threshold))
    return items


def _first(value: QueryValue) -> str:
    if not value:
        return ""
    return value if isinstance(value, str) else value[0]


def build_request_config(
    query: Mapping[str, QueryValue],
    settings: AppSettings,
) -> RequestConfig:
    """Effective denom/rest_base/divisor; empty values use the settings defaults."""

    denom = _first(query.get("denom")) or settings.default_denom
    rest_base = _first(query.get("rest_base")) or settings.default_rest_base
    divisor = _first(query.get("divisor")) or settings.default_divisor
    return RequestConfig(
        denom=denom,
        rest_base=rest_base,
        divisor=divisor,
        decimals=derive_decimals(divisor),
    )


def normalize_query(
    query: Mapping[str, QueryValue],
    settings: AppSettings,
) -> tuple[list[QueryItem], RequestConfig]:
    """Parse every supported key of a balances request."""

    items = build_query_items(
        parse_csv_param(query.get("addresses")),
        parse_csv_param(query.get("names")),
        parse_csv_param(query.get("thresholds")),
    )
    return items, build_request_config(query, settings)
