"""Derivación de campos de reserva y resolución de referencias.

Funciones puras: no tocan el RecordStore. El sincronizador les pasa las
secuencias de identificadores ya leídas y recibe `ResolvedBooking`s listos
para validar e insertar.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Sequence

from core.domain.errors import ReferentialIntegrityError
from core.domain.models import (
    BookingSeed,
    BookingStatus,
    CabinSeed,
    ResolvedBooking,
    StatusRule,
)

logger = logging.getLogger(__name__)

DEFAULT_BREAKFAST_PRICE = 15


def count_nights(start: date, end: date) -> int:
    """Días completos entre `start` y `end`."""

    return (end - start).days


def cabin_price(*, num_nights: int, cabin: CabinSeed) -> int:
    return num_nights * (cabin.regular_price - cabin.discount)


def extras_price(
    *,
    num_nights: int,
    num_guests: int,
    has_breakfast: bool,
    breakfast_price: int = DEFAULT_BREAKFAST_PRICE,
) -> int:
    if not has_breakfast:
        return 0
    return num_nights * breakfast_price * num_guests


def derive_status(
    *,
    start: date,
    end: date,
    today: date,
    rule: StatusRule = StatusRule.LAST_MATCH,
) -> BookingStatus | None:
    """Estado de la reserva respecto a `today`.

    Condiciones, en orden:
    a. termina estrictamente antes de hoy -> checked-out
    b. empieza hoy o en el futuro -> unconfirmed
    c. termina hoy o en el futuro y empezó estrictamente antes de hoy -> checked-in

    Solo hay solape cuando `start > end` (a y b a la vez); ahí `rule` decide.
    """

    candidates = (
        (end < today, BookingStatus.CHECKED_OUT),
        (start >= today, BookingStatus.UNCONFIRMED),
        (end >= today and start < today, BookingStatus.CHECKED_IN),
    )

    status: BookingStatus | None = None
    for matched, value in candidates:
        if not matched:
            continue
        if rule is StatusRule.FIRST_MATCH:
            return value
        status = value
    return status


def lookup_ref(ids: Sequence[int], ref: int) -> int | None:
    """Traduce una referencia posicional 1-based a un identificador del store."""

    index = ref - 1
    if index < 0 or index >= len(ids):
        return None
    return ids[index]


@dataclass
class ResolutionResult:
    bookings: list[ResolvedBooking]
    warnings: list[str] = field(default_factory=list)

    @property
    def missing_guest(self) -> list[ResolvedBooking]:
        return [b for b in self.bookings if b.guest_id is None]

    @property
    def missing_cabin(self) -> list[ResolvedBooking]:
        return [b for b in self.bookings if b.cabin_id is None]


def resolve_booking(
    booking: BookingSeed,
    *,
    cabins: Sequence[CabinSeed],
    guest_ids: Sequence[int],
    cabin_ids: Sequence[int],
    today: date,
    breakfast_price: int = DEFAULT_BREAKFAST_PRICE,
    rule: StatusRule = StatusRule.LAST_MATCH,
) -> ResolvedBooking:
    # El precio sale de la cabaña de la seed, no de la fila del store.
    cabin_index = booking.cabin_ref - 1
    if cabin_index >= len(cabins):
        raise ReferentialIntegrityError(
            f"Booking references cabin #{booking.cabin_ref} but the seed has {len(cabins)} cabins",
            unresolved=1,
        )
    cabin = cabins[cabin_index]

    num_nights = count_nights(booking.start_date, booking.end_date)
    cabin_total = cabin_price(num_nights=num_nights, cabin=cabin)
    extras_total = extras_price(
        num_nights=num_nights,
        num_guests=booking.num_guests,
        has_breakfast=booking.has_breakfast,
        breakfast_price=breakfast_price,
    )

    return ResolvedBooking(
        created_at=booking.created_at,
        start_date=booking.start_date,
        end_date=booking.end_date,
        num_nights=num_nights,
        num_guests=booking.num_guests,
        cabin_price=cabin_total,
        extras_price=extras_total,
        total_price=cabin_total + extras_total,
        status=derive_status(
            start=booking.start_date,
            end=booking.end_date,
            today=today,
            rule=rule,
        ),
        has_breakfast=booking.has_breakfast,
        is_paid=booking.is_paid,
        observations=booking.observations,
        guest_id=lookup_ref(guest_ids, booking.guest_ref),
        cabin_id=lookup_ref(cabin_ids, booking.cabin_ref),
    )


def resolve_bookings(
    bookings: Sequence[BookingSeed],
    *,
    cabins: Sequence[CabinSeed],
    guest_ids: Sequence[int],
    cabin_ids: Sequence[int],
    today: date,
    breakfast_price: int = DEFAULT_BREAKFAST_PRICE,
    rule: StatusRule = StatusRule.LAST_MATCH,
) -> ResolutionResult:
    result = ResolutionResult(bookings=[])
    for position, booking in enumerate(bookings, start=1):
        resolved = resolve_booking(
            booking,
            cabins=cabins,
            guest_ids=guest_ids,
            cabin_ids=cabin_ids,
            today=today,
            breakfast_price=breakfast_price,
            rule=rule,
        )
        if resolved.guest_id is None or resolved.cabin_id is None:
            message = (
                f"Booking #{position} is missing a store id "
                f"(guestRef={booking.guest_ref} -> {resolved.guest_id}, "
                f"cabinRef={booking.cabin_ref} -> {resolved.cabin_id})"
            )
            logger.warning(message)
            result.warnings.append(message)
        result.bookings.append(resolved)
    return result
