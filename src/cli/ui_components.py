"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import ResolvedBooking, SyncReport
from core.interfaces.record_store import BOOKINGS


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("HOTEL SEEDER", style="bold cyan")
    subtitle = Text("Sample data • Guests • Cabins • Bookings", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_counts_table(counts: Mapping[str, int], *, title: str = "Rows per collection") -> Table:
    table = Table(title=title)
    table.add_column("Collection", style="cyan", no_wrap=True)
    table.add_column("Rows", style="white", justify="right")
    for collection, rows in counts.items():
        table.add_row(collection, str(rows))
    return table


def build_bookings_table(bookings: Sequence[ResolvedBooking]) -> Table:
    """Tabla con las reservas resueltas (comando `preview`)."""

    table = Table(title="Resolved bookings")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Guest", style="cyan", justify="right")
    table.add_column("Cabin", style="cyan", justify="right")
    table.add_column("Dates", style="white")
    table.add_column("Nights", justify="right")
    table.add_column("Cabin $", justify="right")
    table.add_column("Extras $", justify="right")
    table.add_column("Total $", style="bold", justify="right")
    table.add_column("Status", style="magenta")
    for position, booking in enumerate(bookings, start=1):
        table.add_row(
            str(position),
            "-" if booking.guest_id is None else str(booking.guest_id),
            "-" if booking.cabin_id is None else str(booking.cabin_id),
            f"{booking.start_date.isoformat()} → {booking.end_date.isoformat()}",
            str(booking.num_nights),
            str(booking.cabin_price),
            str(booking.extras_price),
            str(booking.total_price),
            booking.status.value if booking.status else "-",
        )
    return table


def _success_message(report: SyncReport) -> str:
    if report.operation == "upload-bookings":
        return f"Successfully uploaded {report.rows_written.get(BOOKINGS, 0)} bookings!"
    if report.rows_written:
        return "All data uploaded successfully!"
    return "Done."


def build_report_panel(report: SyncReport) -> Panel:
    """Notificación única de éxito o fallo para una ejecución."""

    ok = report.succeeded
    border = "green" if ok else "red"
    title = Text(
        f"{report.operation}: {'success' if ok else 'failed'}",
        style=f"bold {border}",
    )

    body = Text()
    if ok:
        body.append(f"{_success_message(report)}\n")
    else:
        body.append(f"{report.error or 'Failed to upload data'}\n", style="red")

    for collection, rows in report.rows_written.items():
        body.append(f"- {collection}: {rows} rows\n")

    if report.warnings:
        body.append("\nWarnings:\n", style="bold yellow")
        for warning in report.warnings:
            body.append(f"- {warning}\n", style="yellow")

    return Panel(body, title=title, border_style=border)
