"""Shared fixtures: settings isolated from the environment, fake REST node."""

from __future__ import annotations

import asyncio
import json
from typing import Callable

import httpx
import pytest

from core.config import AppSettings

BALANCE_PATH = "/cosmos/bank/v1beta1/balances/"


@pytest.fixture
def settings(monkeypatch) -> AppSettings:
    for key in ("DEFAULT_DENOM", "DEFAULT_REST_BASE", "DEFAULT_DIVISOR", "MAX_FRACTION_DIGITS"):
        monkeypatch.delenv(f"VOTA_BALANCES_{key}", raising=False)
    return AppSettings(_env_file=None)


def balance_body(amount: object, denom: str = "peaka") -> dict:
    return {"balance": {"denom": denom, "amount": amount}}


@pytest.fixture
def make_transport() -> Callable[..., httpx.MockTransport]:
    """Build a MockTransport answering by address.

    `answers` maps address -> JSON body, an `httpx.Response`, or an
    exception instance to raise. Every request is recorded in `calls`.
    """

    def factory(answers: dict[str, object], calls: list[httpx.Request] | None = None, delays=None):
        delays = delays or {}

        async def handler(request: httpx.Request) -> httpx.Response:
            if calls is not None:
                calls.append(request)
            path = request.url.path
            address = path[len(BALANCE_PATH):].split("/", 1)[0] if path.startswith(BALANCE_PATH) else ""
            if address in delays:
                await asyncio.sleep(delays[address])
            answer = answers.get(address)
            if isinstance(answer, Exception):
                raise answer
            if isinstance(answer, httpx.Response):
                return answer
            if answer is None:
                return httpx.Response(404, json={"code": 5, "message": "not found"})
            if isinstance(answer, str):
                return httpx.Response(200, content=answer.encode())
            return httpx.Response(200, content=json.dumps(answer).encode())

        return httpx.MockTransport(handler)

    return factory
