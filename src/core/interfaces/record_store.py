"""Contrato del RecordStore.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que el store remoto (PostgREST) y el store en memoria sean
  intercambiables y testeables sin acoplar el Core a implementaciones concretas.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

Record = dict[str, Any]

GUESTS = "guests"
CABINS = "cabins"
BOOKINGS = "bookings"

COLLECTIONS: tuple[str, ...] = (GUESTS, CABINS, BOOKINGS)


@dataclass(frozen=True)
class Predicate:
    """Filtro simple `column <operator> value` (operadores estilo PostgREST)."""

    column: str
    operator: str
    value: Any

    @classmethod
    def match_all(cls) -> "Predicate":
        # Los identificadores asignados por el store son siempre positivos.
        return cls(column="id", operator="gt", value=0)

    def matches(self, record: Mapping[str, Any]) -> bool:
        current = record.get(self.column)
        if current is None:
            return False
        if self.operator == "gt":
            return current > self.value
        raise ValueError(f"Unsupported predicate operator: {self.operator}")

    def as_query_param(self) -> tuple[str, str]:
        return self.column, f"{self.operator}.{self.value}"


@runtime_checkable
class RecordStore(Protocol):
    """Persistencia remota orientada a tablas con identificadores asignados.

    Reglas de diseño:
    - Todos los métodos son asíncronos porque típicamente harán I/O (HTTP).
    - Cualquier fallo se reporta como `core.domain.errors.StoreError`.
    """

    async def delete(self, collection: str, predicate: Predicate) -> None:
        """Borra los registros de `collection` que cumplen `predicate`."""

        ...

    async def insert(self, collection: str, records: Sequence[Record]) -> list[Record]:
        """Inserta `records` en lote y devuelve las filas guardadas (con `id`)."""

        ...

    async def select(
        self,
        collection: str,
        fields: Sequence[str] = ("id",),
        *,
        order_by: str = "id",
    ) -> list[Record]:
        """Lee `fields` de todos los registros, ordenados ascendentemente."""

        ...
