"""Sincronización de datos de ejemplo contra el RecordStore.

Borra y vuelve a poblar huéspedes, cabañas y reservas manteniendo la
consistencia referencial aunque el store asigne sus propios identificadores.

Política de errores:
- Borrados e inserción de huéspedes/cabañas son best-effort: un `StoreError`
  se registra y la secuencia continúa.
- Resolución e inserción de reservas son críticas: lanzan y abortan el resto.

Concurrencia:
- Una instancia ejecuta una operación cada vez (`SyncState.RUNNING`); el
  store no se protege frente a otros clientes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Awaitable, Callable, Sequence

from core.config import AppSettings
from core.domain.errors import (
    MissingPrerequisiteError,
    PersistenceError,
    ReferentialIntegrityError,
    SeedSyncError,
    StoreError,
    SyncInProgressError,
)
from core.domain.models import (
    BookingSeed,
    CabinSeed,
    GuestSeed,
    SyncReport,
    SyncState,
)
from core.interfaces.record_store import (
    BOOKINGS,
    CABINS,
    COLLECTIONS,
    GUESTS,
    Predicate,
    Record,
    RecordStore,
)
from core.seed_data import CABINS as SEED_CABINS
from core.seed_data import GUESTS as SEED_GUESTS
from core.seed_data import build_bookings
from core.services.booking_resolver import ResolutionResult, resolve_bookings

logger = logging.getLogger(__name__)

NATIONAL_ID_COLUMNS: frozenset[str] = frozenset({"nationalID", "national_id"})

# Bookings primero: referencian a guests y cabins.
DELETE_ORDER: tuple[str, ...] = (BOOKINGS, GUESTS, CABINS)


@dataclass
class SyncHooks:
    """Callbacks opcionales para capas de UI (progreso, avisos)."""

    warning: Callable[[str], None] | None = None
    step: Callable[[str], None] | None = None
    state_changed: Callable[[SyncState], None] | None = None


class SeedSynchronizer:
    def __init__(
        self,
        store: RecordStore,
        *,
        settings: AppSettings | None = None,
        guests: Sequence[GuestSeed] = SEED_GUESTS,
        cabins: Sequence[CabinSeed] = SEED_CABINS,
        bookings: Sequence[BookingSeed] | None = None,
        today: Callable[[], date] = date.today,
        hooks: SyncHooks | None = None,
    ) -> None:
        self._store = store
        self._settings = settings or AppSettings()
        self._guests = list(guests)
        self._cabins = list(cabins)
        self._bookings = list(bookings) if bookings is not None else None
        self._today = today
        self._hooks = hooks or SyncHooks()
        self._state = SyncState.IDLE
        self._warnings: list[str] = []

    @property
    def state(self) -> SyncState:
        return self._state

    def _set_state(self, state: SyncState) -> None:
        self._state = state
        if self._hooks.state_changed:
            self._hooks.state_changed(state)

    def _warn(self, message: str) -> None:
        self._warnings.append(message)
        if self._hooks.warning:
            self._hooks.warning(message)

    def _step(self, message: str) -> None:
        logger.info(message)
        if self._hooks.step:
            self._hooks.step(message)

    # -- best-effort steps -------------------------------------------------

    async def _delete_collection(self, collection: str) -> None:
        try:
            await self._store.delete(collection, Predicate.match_all())
        except StoreError as exc:
            logger.error("Could not delete %s: %s", collection, exc.message)
            self._warn(f"Delete {collection} failed: {exc.message}")

    async def clear_bookings(self) -> None:
        self._step("Deleting bookings")
        await self._delete_collection(BOOKINGS)

    async def clear_all(self) -> None:
        """Borra bookings, guests y cabins, en ese orden estricto."""

        for collection in DELETE_ORDER:
            self._step(f"Deleting {collection}")
            await self._delete_collection(collection)

    async def _insert_guests(self) -> int:
        records = [guest.to_record() for guest in self._guests]
        try:
            return len(await self._store.insert(GUESTS, records))
        except StoreError as exc:
            if exc.column not in NATIONAL_ID_COLUMNS:
                logger.error("Error creating guests: %s", exc.message)
                self._warn(f"Insert guests failed: {exc.message}")
                return 0
            logger.warning(
                "Store rejected column %r, retrying guests without it", exc.column
            )

        stripped = [
            {k: v for k, v in record.items() if k not in NATIONAL_ID_COLUMNS}
            for record in records
        ]
        try:
            return len(await self._store.insert(GUESTS, stripped))
        except StoreError as exc:
            logger.error("Error creating guests: %s", exc.message)
            self._warn(f"Insert guests failed: {exc.message}")
            return 0

    async def _insert_cabins(self) -> int:
        records = [cabin.to_record() for cabin in self._cabins]
        try:
            return len(await self._store.insert(CABINS, records))
        except StoreError as exc:
            logger.error("Error creating cabins: %s", exc.message)
            self._warn(f"Insert cabins failed: {exc.message}")
            return 0

    async def seed_guests_and_cabins(self) -> dict[str, int]:
        self._step("Creating guests")
        guests = await self._insert_guests()
        self._step("Creating cabins")
        cabins = await self._insert_cabins()
        return {GUESTS: guests, CABINS: cabins}

    # -- critical steps ----------------------------------------------------

    async def _fetch_ids(self, collection: str) -> list[int]:
        try:
            rows = await self._store.select(collection, ("id",), order_by="id")
        except StoreError as exc:
            raise MissingPrerequisiteError(
                f"Failed to fetch {collection}: {exc.message}"
            ) from exc
        if not rows:
            raise MissingPrerequisiteError(
                f"No {collection} found in the store. Create {collection} first."
            )
        return [row["id"] for row in rows]

    async def preview_bookings(self) -> ResolutionResult:
        """Resuelve las reservas contra los ids actuales del store, sin escribir."""

        guest_ids = await self._fetch_ids(GUESTS)
        cabin_ids = await self._fetch_ids(CABINS)

        today = self._today()
        seeds = self._bookings if self._bookings is not None else build_bookings(today)
        return resolve_bookings(
            seeds,
            cabins=self._cabins,
            guest_ids=guest_ids,
            cabin_ids=cabin_ids,
            today=today,
            breakfast_price=self._settings.breakfast_price,
            rule=self._settings.status_rule,
        )

    async def resolve_and_seed_bookings(self) -> list[Record]:
        """Resuelve referencias posicionales e inserta todas las reservas.

        Supone que el orden ascendente por `id` coincide con el orden de
        inserción de huéspedes y cabañas.
        """

        self._step("Creating bookings")
        result = await self.preview_bookings()
        for message in result.warnings:
            self._warn(message)

        if result.missing_guest:
            raise ReferentialIntegrityError(
                f"{len(result.missing_guest)} bookings have no guestId",
                unresolved=len(result.missing_guest),
            )
        if result.missing_cabin:
            raise ReferentialIntegrityError(
                f"{len(result.missing_cabin)} bookings have no cabinId",
                unresolved=len(result.missing_cabin),
            )

        records = [booking.to_record() for booking in result.bookings]
        try:
            inserted = await self._store.insert(BOOKINGS, records)
        except StoreError as exc:
            logger.error("Error inserting bookings: %s", exc.message)
            raise PersistenceError(
                f"Failed to insert bookings: {exc.message}",
                original=exc.message,
            ) from exc
        return inserted

    # -- orchestration -----------------------------------------------------

    async def run(
        self,
        operation: str,
        action: Callable[[SyncReport], Awaitable[None]],
    ) -> SyncReport:
        """Ejecuta `action` con transiciones de estado y devuelve el resumen."""

        if self._state is SyncState.RUNNING:
            raise SyncInProgressError(f"Cannot start {operation!r}: another run is in progress")

        self._warnings = []
        report = SyncReport(operation=operation, started_at=datetime.now(timezone.utc))
        self._set_state(SyncState.RUNNING)
        try:
            await action(report)
        except SeedSyncError as exc:
            logger.error("%s failed: %s", operation, exc)
            report.error = str(exc)
            report.state = SyncState.FAILED
        except Exception:
            self._set_state(SyncState.FAILED)
            raise
        else:
            report.state = SyncState.SUCCEEDED
        finally:
            report.warnings = list(self._warnings)
            report.finished_at = datetime.now(timezone.utc)

        self._set_state(report.state)
        return report

    async def upload_all(self) -> SyncReport:
        async def action(report: SyncReport) -> None:
            await self.clear_all()
            report.rows_written.update(await self.seed_guests_and_cabins())
            report.rows_written[BOOKINGS] = len(await self.resolve_and_seed_bookings())

        return await self.run("upload-all", action)

    async def upload_bookings_only(self) -> SyncReport:
        async def action(report: SyncReport) -> None:
            await self.clear_bookings()
            report.rows_written[BOOKINGS] = len(await self.resolve_and_seed_bookings())

        return await self.run("upload-bookings", action)

    async def clear(self) -> SyncReport:
        async def action(report: SyncReport) -> None:
            await self.clear_all()

        return await self.run("clear", action)

    async def count_rows(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for collection in COLLECTIONS:
            counts[collection] = len(await self._store.select(collection, ("id",)))
        return counts
