"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import ResultSet


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (no en modo JSON)."""

    title = Text("VOTA balances", style="bold cyan")
    subtitle = Text("Cosmos bank balances • thresholds • alerts", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _alert_cell(alert: bool | None) -> Text:
    if alert is None:
        return Text("-", style="dim")
    if alert:
        return Text("LOW", style="bold red")
    return Text("OK", style="green")


def build_balances_table(result: ResultSet) -> Table:
    """Tabla Rich con una fila por cuenta, en el orden de la petición."""

    meta = result.meta
    table = Table(
        title=f"Balances ({meta.denom})",
        caption=f"{meta.rest_base} • updated {meta.updated_at.isoformat(timespec='seconds')}",
    )
    table.add_column("Account", style="cyan", no_wrap=True)
    table.add_column("Address", style="white")
    table.add_column(f"Balance ({meta.denom})", style="dim", justify="right")
    table.add_column("Balance", style="bold", justify="right")
    table.add_column("Threshold", justify="right")
    table.add_column("Alert")

    for row in result.rows:
        threshold = "" if row.threshold is None else f"{row.threshold:g}"
        table.add_row(
            row.account,
            row.address,
            row.balance_raw,
            row.balance_formatted,
            threshold,
            _alert_cell(row.alert),
        )
    return table
