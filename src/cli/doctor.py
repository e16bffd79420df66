"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.services.params import derive_decimals

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

_NODE_INFO_PATH = "/cosmos/base/tendermint/v1beta1/node_info"


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return response.is_success, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or exc.__class__.__name__


@app.command()
def run(
    rest_base: str | None = typer.Option(None, "--rest-base", help="REST base URL to probe."),
) -> None:
    """Show the effective configuration and probe the REST endpoint."""

    settings = AppSettings()
    base = rest_base or settings.default_rest_base

    table = Table(title="VOTA balances Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Denom", "OK", settings.default_denom)
    table.add_row(
        "Divisor",
        "OK",
        f"{settings.default_divisor} -> {derive_decimals(settings.default_divisor)} decimals",
    )
    table.add_row("Max fraction digits", "OK", str(settings.max_fraction_digits))
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(base.rstrip("/") + _NODE_INFO_PATH, settings))
    table.add_row("REST endpoint", "OK" if ok_http else "FAIL", f"{base} ({detail_http})")

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] Unreachable endpoints do not fail `balances`; "
            "every address just reports a zero balance."
        )
