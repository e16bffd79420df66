"""Exact fixed-point helpers for token amounts.

Balances arrive as base-unit integers that routinely exceed 2**53, so
every step here stays in Python `int`. No floats.
"""

from __future__ import annotations

import re

_PLAIN_INT_RE = re.compile(r"\s*[0-9]+\s*")


def to_bigint_safe(value: object) -> int:
    """Parse a non-negative base-10 integer, mapping anything else to 0."""

    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value if value >= 0 else 0
    if not isinstance(value, str) or not _PLAIN_INT_RE.fullmatch(value):
        return 0
    try:
        return int(value)
    except ValueError:
        # Longer than sys.get_int_max_str_digits().
        return 0


def format_units(amount: int, decimals: int, max_fraction: int = 6) -> str:
    """Render `amount / 10**decimals` truncated to `max_fraction` digits.

    Trailing zeros are stripped; a zero fraction yields the bare integer.

    >>> format_units(1234567890123456789, 18)
    '1.234567'
    >>> format_units(5_000_000, 6)
    '5'
    """

    if decimals <= 0:
        return str(amount)

    whole, frac = divmod(amount, 10**decimals)
    if frac == 0:
        return str(whole)

    frac_str = str(frac).zfill(decimals)[: max(max_fraction, 0)].rstrip("0")
    if not frac_str:
        return str(whole)
    return f"{whole}.{frac_str}"
