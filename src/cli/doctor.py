"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.postgrest_store import PostgrestRecordStore
from core.config import AppSettings, write_user_env_vars
from core.domain.errors import StoreError
from core.interfaces.record_store import COLLECTIONS

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_collections(settings: AppSettings) -> list[tuple[str, bool, str]]:
    results: list[tuple[str, bool, str]] = []
    async with PostgrestRecordStore(settings) as store:
        for collection in COLLECTIONS:
            try:
                rows = await store.select(collection, ("id",))
            except StoreError as exc:
                results.append((collection, False, exc.message))
                continue
            results.append((collection, True, f"{len(rows)} rows"))
    return results


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Hotel Seeder Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Store URL", "OK" if settings.store_url else "MISSING", settings.store_url or "-")
    table.add_row("Store API key", "OK" if settings.store_api_key else "MISSING", "hidden")
    table.add_row("Breakfast price", "OK", str(settings.breakfast_price))
    table.add_row("Status rule", "OK", settings.status_rule.value)

    # Connectivity (best-effort)
    if settings.store_configured:
        for collection, ok, detail in asyncio.run(_check_collections(settings)):
            table.add_row(f"Table {collection}", "OK" if ok else "FAIL", detail)
    else:
        table.add_row("Connectivity", "SKIPPED", "Store not configured")

    _console.print(table)

    if not settings.store_configured:
        _console.print(
            "\n[yellow]Note:[/yellow] run `hotel-seeder doctor setup-store` or use `--dry-run`."
        )


@app.command(name="setup-store")
def setup_store() -> None:
    """Interactive store setup (stores config in the user config .env)."""

    store_url = typer.prompt("Store URL (e.g. https://xyz.supabase.co)").strip()
    api_key = typer.prompt("Store API key", hide_input=True, confirmation_prompt=False).strip()

    if not store_url.startswith(("http://", "https://")):
        raise typer.BadParameter("store URL must start with http:// or https://")
    if not api_key:
        raise typer.BadParameter("API key is required")

    env_path = write_user_env_vars(
        {
            "HOTEL_SEEDER_STORE_URL": store_url,
            "HOTEL_SEEDER_STORE_API_KEY": api_key,
        }
    )

    _console.print(f"[green]Saved store config to:[/green] {env_path}")
