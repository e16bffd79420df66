"""Command-line entry point (Typer).

Commands:
- `balances`: query balances for a comma-separated list of addresses.
- `doctor`: configuration and connectivity diagnostics.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.json_exporter import dumps_result, export_result_json
from cli import doctor
from cli.ui_components import build_balances_table, print_banner
from core.config import AppSettings
from core.errors import InternalError, ValidationError
from core.services.balance_pipeline import aggregate_balances

app = typer.Typer(no_args_is_help=True, help="Token balances with threshold alerts.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


@app.command()
def balances(
    addresses: str = typer.Option(..., "--addresses", "-a", help="Comma-separated account addresses."),
    names: str | None = typer.Option(None, "--names", "-n", help="Comma-separated display names."),
    thresholds: str | None = typer.Option(
        None, "--thresholds", "-t", help="Comma-separated alert thresholds (display units)."
    ),
    denom: str | None = typer.Option(None, "--denom", help="Denomination to query."),
    rest_base: str | None = typer.Option(None, "--rest-base", help="Cosmos REST base URL."),
    divisor: str | None = typer.Option(None, "--divisor", help="Divisor, e.g. 1000000000000000000."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON result."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Also write the JSON result to a file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Fetch balances and flag accounts under their threshold."""

    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    query = {
        "addresses": addresses,
        "names": names,
        "thresholds": thresholds,
        "denom": denom,
        "rest_base": rest_base,
        "divisor": divisor,
    }

    try:
        result = asyncio.run(aggregate_balances(query=query, settings=settings))
    except ValidationError as exc:
        _err_console.print(f"[red]Error:[/red] {exc.message}")
        raise typer.Exit(code=2) from exc
    except InternalError as exc:
        _err_console.print(f"[red]Internal error:[/red] {exc.message}")
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(dumps_result(result))
    else:
        print_banner(_console)
        _console.print(build_balances_table(result))

    if output is not None:
        path = export_result_json(result=result, output_path=output)
        _err_console.print(f"[green]Saved JSON to:[/green] {path}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
