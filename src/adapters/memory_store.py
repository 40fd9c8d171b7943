"""RecordStore en memoria.

Se usa para `--dry-run` y en tests: asigna identificadores incrementales por
colección (igual que una secuencia de Postgres, sin reutilizar ids tras un
borrado) y puede simular columnas que el esquema no conoce.
"""

from __future__ import annotations

import copy
from typing import Iterable, Sequence

from core.domain.errors import StoreError
from core.interfaces.record_store import Predicate, Record, RecordStore


class InMemoryRecordStore(RecordStore):
    def __init__(
        self,
        *,
        rejected_columns: Iterable[str] = (),
        first_id: int = 1,
    ) -> None:
        self._tables: dict[str, list[Record]] = {}
        self._next_id: dict[str, int] = {}
        self._first_id = first_id
        self._rejected_columns = set(rejected_columns)

    def rows(self, collection: str) -> list[Record]:
        return copy.deepcopy(self._tables.get(collection, []))

    async def delete(self, collection: str, predicate: Predicate) -> None:
        table = self._tables.get(collection, [])
        self._tables[collection] = [row for row in table if not predicate.matches(row)]

    async def insert(self, collection: str, records: Sequence[Record]) -> list[Record]:
        for record in records:
            for column in record:
                if column in self._rejected_columns:
                    raise StoreError(
                        f"Could not find the '{column}' column of '{collection}' in the schema cache",
                        code="PGRST204",
                        column=column,
                        status_code=400,
                    )

        table = self._tables.setdefault(collection, [])
        inserted: list[Record] = []
        for record in records:
            next_id = self._next_id.get(collection, self._first_id)
            self._next_id[collection] = next_id + 1
            row = {**copy.deepcopy(record), "id": next_id}
            table.append(row)
            inserted.append(copy.deepcopy(row))
        return inserted

    async def select(
        self,
        collection: str,
        fields: Sequence[str] = ("id",),
        *,
        order_by: str = "id",
    ) -> list[Record]:
        table = sorted(self._tables.get(collection, []), key=lambda row: row[order_by])
        return [{field: row.get(field) for field in fields} for row in table]
