"""Cosmos bank REST adapter: one request per address, zero on failure."""

import httpx
import pytest

from adapters.cosmos_bank import CosmosBankBalanceSource, balance_by_denom_url
from adapters.http_client import build_async_client
from core.interfaces.balance_source import BalanceSource
from tests.conftest import balance_body

REST = "https://lcd.example"


async def _fetch(settings, transport, address, denom="peaka"):
    async with build_async_client(settings, transport=transport) as client:
        source = CosmosBankBalanceSource(REST, settings, client=client)
        return await source.fetch_amount(address, denom)


def test_url_layout():
    assert (
        balance_by_denom_url("https://lcd.example/", "dora1abc")
        == "https://lcd.example/cosmos/bank/v1beta1/balances/dora1abc/by_denom"
    )


def test_implements_balance_source(settings):
    assert isinstance(CosmosBankBalanceSource(REST, settings), BalanceSource)


@pytest.mark.asyncio
async def test_returns_amount_and_sends_denom(settings, make_transport):
    calls: list[httpx.Request] = []
    transport = make_transport({"dora1abc": balance_body("1234567890123456789")}, calls)

    amount = await _fetch(settings, transport, "dora1abc", denom="ibc/ABC")

    assert amount == "1234567890123456789"
    assert len(calls) == 1
    assert calls[0].method == "GET"
    assert calls[0].url.params["denom"] == "ibc/ABC"
    assert calls[0].headers["Accept"] == "application/json"


@pytest.mark.asyncio
async def test_numeric_amount_is_stringified(settings, make_transport):
    transport = make_transport({"dora1abc": balance_body(42)})

    assert await _fetch(settings, transport, "dora1abc") == "42"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "answer",
    [
        httpx.Response(500, json={"message": "boom"}),
        httpx.Response(404, json={"message": "not found"}),
        "not json",
        {"balance": {"denom": "peaka"}},
        {"balance": None},
        [],
        httpx.ConnectError("connection refused"),
        httpx.ReadTimeout("timed out"),
    ],
)
async def test_failures_degrade_to_zero(settings, make_transport, answer):
    calls: list[httpx.Request] = []
    transport = make_transport({"dora1abc": answer}, calls)

    assert await _fetch(settings, transport, "dora1abc") == "0"
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_failure_is_logged(settings, make_transport, caplog):
    transport = make_transport({"dora1abc": httpx.Response(503)})

    with caplog.at_level("WARNING", logger="adapters.cosmos_bank"):
        await _fetch(settings, transport, "dora1abc")

    assert "dora1abc" in caplog.text
    assert "HTTP 503" in caplog.text
