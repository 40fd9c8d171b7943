"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los alias camelCase coinciden con las columnas del RecordStore, así que el
  mismo modelo sirve para validar la seed y para serializar el payload.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se persiste.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class BookingStatus(str, Enum):
    """Estado derivado de una reserva respecto al día de referencia."""

    UNCONFIRMED = "unconfirmed"
    CHECKED_IN = "checked-in"
    CHECKED_OUT = "checked-out"


class StatusRule(str, Enum):
    """Cómo se combinan las tres condiciones de estado.

    `last_match`: se evalúan todas y la última que se cumple gana.
    `first_match`: cadena de prioridad, gana la primera que se cumple.
    """

    LAST_MATCH = "last_match"
    FIRST_MATCH = "first_match"


class SyncState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class _SeedModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    def to_record(self) -> dict[str, Any]:
        """Payload listo para el RecordStore (columnas camelCase, sin nulos)."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class GuestSeed(_SeedModel):
    """Huésped de ejemplo. Su identidad es su posición en la secuencia."""

    full_name: str = Field(..., alias="fullName", min_length=1)
    email: str = Field(..., min_length=3)
    national_id: str | None = Field(
        default=None,
        alias="nationalID",
        description="Documento nacional (opcional; hay esquemas sin esta columna).",
    )
    nationality: str = Field(..., min_length=1)
    country_flag: str = Field(
        ...,
        alias="countryFlag",
        description="URL de la bandera del país.",
    )


class CabinSeed(_SeedModel):
    """Cabaña de ejemplo. Su identidad es su posición en la secuencia."""

    name: str = Field(..., min_length=1)
    max_capacity: int = Field(..., alias="maxCapacity", ge=1)
    regular_price: int = Field(..., alias="regularPrice", ge=0)
    discount: int = Field(default=0, ge=0)
    description: str = ""
    image: str = Field(default="", description="Referencia a la imagen de la cabaña.")

    @model_validator(mode="after")
    def _discount_within_price(self) -> "CabinSeed":
        if self.discount > self.regular_price:
            raise ValueError("discount cannot exceed regularPrice")
        return self


class BookingSeed(_SeedModel):
    """Reserva de ejemplo con referencias posicionales (1-based)."""

    created_at: datetime | None = None
    start_date: date = Field(..., alias="startDate")
    end_date: date = Field(..., alias="endDate")
    num_guests: int = Field(..., alias="numGuests", ge=1)
    has_breakfast: bool = Field(default=False, alias="hasBreakfast")
    is_paid: bool = Field(default=False, alias="isPaid")
    observations: str = ""
    guest_ref: int = Field(..., alias="guestRef", ge=1)
    cabin_ref: int = Field(..., alias="cabinRef", ge=1)


class BookingTemplate(BaseModel):
    """Reserva declarada con desplazamientos en días respecto a "hoy".

    Las fechas de la seed son relativas para que siempre haya reservas
    pasadas, en curso y futuras sin importar cuándo se ejecute la carga.
    """

    model_config = ConfigDict(frozen=True)

    created_offset: int
    start_offset: int
    end_offset: int
    num_guests: int = Field(..., ge=1)
    has_breakfast: bool = False
    is_paid: bool = False
    observations: str = ""
    guest_ref: int = Field(..., ge=1)
    cabin_ref: int = Field(..., ge=1)

    def materialize(self, today: date) -> BookingSeed:
        created = datetime.combine(
            today + timedelta(days=self.created_offset),
            datetime.min.time(),
            tzinfo=timezone.utc,
        )
        return BookingSeed(
            created_at=created,
            start_date=today + timedelta(days=self.start_offset),
            end_date=today + timedelta(days=self.end_offset),
            num_guests=self.num_guests,
            has_breakfast=self.has_breakfast,
            is_paid=self.is_paid,
            observations=self.observations,
            guest_ref=self.guest_ref,
            cabin_ref=self.cabin_ref,
        )


class ResolvedBooking(_SeedModel):
    """Reserva con campos derivados e identificadores reales del store."""

    created_at: datetime | None = None
    start_date: date = Field(..., alias="startDate")
    end_date: date = Field(..., alias="endDate")
    num_nights: int = Field(..., alias="numNights")
    num_guests: int = Field(..., alias="numGuests")
    cabin_price: int = Field(..., alias="cabinPrice")
    extras_price: int = Field(..., alias="extrasPrice")
    total_price: int = Field(..., alias="totalPrice")
    status: BookingStatus | None = None
    has_breakfast: bool = Field(..., alias="hasBreakfast")
    is_paid: bool = Field(..., alias="isPaid")
    observations: str = ""
    guest_id: int | None = Field(default=None, alias="guestId")
    cabin_id: int | None = Field(default=None, alias="cabinId")

    def to_record(self) -> dict[str, Any]:
        # PostgREST exige las mismas claves en todas las filas de un lote.
        record = super().to_record()
        record.setdefault("status", None)
        return record


class SyncReport(BaseModel):
    """Resumen de una ejecución del sincronizador.

    Es lo único que ve la capa de presentación: una notificación de éxito o
    fallo más los avisos recogidos durante los pasos best-effort.
    """

    operation: str = Field(..., min_length=1)
    state: SyncState = SyncState.IDLE
    rows_written: dict[str, int] = Field(
        default_factory=dict,
        description="Filas insertadas por colección.",
    )
    warnings: list[str] = Field(default_factory=list)
    error: str | None = None
    started_at: datetime | None = None
    finished_at: datetime | None = None

    @property
    def succeeded(self) -> bool:
        return self.state is SyncState.SUCCEEDED
