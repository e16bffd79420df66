"""Request-level errors.

Only failures that invalidate the whole request live here. Per-address
problems (network, bad JSON, malformed amounts) are absorbed where they
happen and never reach the caller as exceptions.
"""

from __future__ import annotations


class BalancesError(Exception):
    """Base class for errors surfaced to the caller."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict[str, str]:
        return {"error": self.message}


class ValidationError(BalancesError):
    """Required input is missing or empty; the pipeline does not run."""

    status_code = 400


class InternalError(BalancesError):
    """Unexpected failure outside the per-address degradation boundary."""

    status_code = 500
