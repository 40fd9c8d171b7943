"""CLI de hotel-seeder (Typer).

Cada comando construye el RecordStore (PostgREST o en memoria con
`--dry-run`), delega en `SeedSynchronizer` y muestra una única notificación
con el resultado.
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Awaitable, Callable, Optional

import typer
from rich.console import Console

from adapters.json_exporter import export_report_json
from adapters.memory_store import InMemoryRecordStore
from adapters.postgrest_store import PostgrestRecordStore
from cli import doctor
from cli.ui_components import (
    build_bookings_table,
    build_counts_table,
    build_report_panel,
    print_banner,
)
from core.config import AppSettings
from core.domain.errors import SeedSyncError
from core.domain.models import SyncReport
from core.interfaces.record_store import RecordStore
from core.logging_config import configure_logging
from core.services.seed_synchronizer import SeedSynchronizer, SyncHooks

app = typer.Typer(
    no_args_is_help=True,
    help="Reset and repopulate guests, cabins and bookings with sample data.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()

DryRunOption = typer.Option(False, "--dry-run", help="Use an in-memory store instead of the remote one.")
ReportOption = typer.Option(None, "--report", help="Write the run summary as JSON to this path.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Show the welcome banner."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)
    if banner:
        print_banner(_console)


@asynccontextmanager
async def open_store(
    settings: AppSettings,
    *,
    dry_run: bool,
    with_prerequisites: bool = False,
) -> AsyncIterator[RecordStore]:
    """Store remoto o, con `--dry-run`, uno en memoria.

    `with_prerequisites` precarga huéspedes y cabañas en el store en memoria
    para los comandos que solo trabajan con reservas.
    """

    if dry_run:
        store = InMemoryRecordStore()
        if with_prerequisites:
            await SeedSynchronizer(store, settings=settings).seed_guests_and_cabins()
        yield store
        return

    if not settings.store_configured:
        raise typer.BadParameter(
            "Store not configured. Set HOTEL_SEEDER_STORE_URL and HOTEL_SEEDER_STORE_API_KEY "
            "or run `hotel-seeder doctor setup-store`."
        )
    async with PostgrestRecordStore(settings) as store:
        yield store


def _build_synchronizer(store: RecordStore, settings: AppSettings) -> SeedSynchronizer:
    hooks = SyncHooks(step=lambda message: _console.print(f"[dim]• {message}[/dim]"))
    return SeedSynchronizer(store, settings=settings, hooks=hooks)


def _run_operation(
    operation: Callable[[SeedSynchronizer], Awaitable[SyncReport]],
    *,
    dry_run: bool,
    report_path: Path | None,
    with_prerequisites: bool = False,
) -> None:
    settings = AppSettings()

    async def runner() -> SyncReport:
        async with open_store(
            settings, dry_run=dry_run, with_prerequisites=with_prerequisites
        ) as store:
            return await operation(_build_synchronizer(store, settings))

    report = asyncio.run(runner())
    _console.print(build_report_panel(report))

    if report_path:
        written = export_report_json(report=report, output_path=report_path)
        _console.print(f"[green]Report saved to:[/green] {written}")

    if not report.succeeded:
        raise typer.Exit(code=1)


@app.command(name="upload-all")
def upload_all(
    dry_run: bool = DryRunOption,
    report: Optional[Path] = ReportOption,
) -> None:
    """Delete everything, then create guests, cabins and bookings."""

    _run_operation(lambda sync: sync.upload_all(), dry_run=dry_run, report_path=report)


@app.command(name="upload-bookings")
def upload_bookings(
    dry_run: bool = DryRunOption,
    report: Optional[Path] = ReportOption,
) -> None:
    """Delete bookings only and recreate them against the existing guests/cabins."""

    _run_operation(
        lambda sync: sync.upload_bookings_only(),
        dry_run=dry_run,
        report_path=report,
        with_prerequisites=True,
    )


@app.command()
def clear(
    dry_run: bool = DryRunOption,
    report: Optional[Path] = ReportOption,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
) -> None:
    """Delete bookings, guests and cabins."""

    if not yes:
        typer.confirm("Delete ALL bookings, guests and cabins?", abort=True)
    _run_operation(lambda sync: sync.clear(), dry_run=dry_run, report_path=report)


@app.command()
def status(dry_run: bool = DryRunOption) -> None:
    """Show how many rows each collection holds."""

    settings = AppSettings()

    async def runner() -> dict[str, int]:
        async with open_store(settings, dry_run=dry_run) as store:
            return await _build_synchronizer(store, settings).count_rows()

    try:
        counts = asyncio.run(runner())
    except SeedSyncError as exc:
        _console.print(f"[red]Could not read the store:[/red] {exc}")
        raise typer.Exit(code=1)
    _console.print(build_counts_table(counts))


@app.command()
def preview(dry_run: bool = DryRunOption) -> None:
    """Resolve the sample bookings against the store's ids without writing."""

    settings = AppSettings()

    async def runner():
        async with open_store(settings, dry_run=dry_run, with_prerequisites=True) as store:
            return await _build_synchronizer(store, settings).preview_bookings()

    try:
        result = asyncio.run(runner())
    except SeedSyncError as exc:
        _console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)

    _console.print(build_bookings_table(result.bookings))
    for warning in result.warnings:
        _console.print(f"[yellow]Warning:[/yellow] {warning}")


def run() -> None:
    app()
