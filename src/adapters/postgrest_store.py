"""RecordStore sobre la API REST de PostgREST (Supabase).

Responsabilidad:
- Traducir delete/insert/select a llamadas `/rest/v1/<tabla>`.
- Normalizar cualquier fallo (HTTP no-2xx, red, JSON inválido) a `StoreError`
  con campos estructurados (`code`, `column`, `status_code`).
"""

from __future__ import annotations

import re
from typing import Any, Sequence

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import StoreError
from core.interfaces.record_store import Predicate, Record, RecordStore

REST_PREFIX = "/rest/v1"

# Códigos de "columna desconocida": PostgREST (schema cache) y SQLSTATE.
_MISSING_COLUMN_CODES = {"PGRST204", "42703"}

_COLUMN_RE = re.compile(
    r"""(?:['"](?P<a>[A-Za-z_][A-Za-z0-9_]*)['"]\s+column)|(?:column\s+['"]?(?P<b>[A-Za-z_][A-Za-z0-9_]*)['"]?)""",
    re.IGNORECASE,
)


def _extract_column(message: str) -> str | None:
    match = _COLUMN_RE.search(message or "")
    if not match:
        return None
    return match.group("a") or match.group("b")


def _store_error_from_response(response: httpx.Response) -> StoreError:
    payload: Any = None
    try:
        payload = response.json()
    except ValueError:
        payload = None

    code: str | None = None
    message = response.text or f"HTTP {response.status_code}"
    if isinstance(payload, dict):
        code = str(payload["code"]) if payload.get("code") is not None else None
        if isinstance(payload.get("message"), str):
            message = payload["message"]

    column = _extract_column(message) if code in _MISSING_COLUMN_CODES else None
    return StoreError(
        message,
        code=code,
        column=column,
        status_code=response.status_code,
    )


class PostgrestRecordStore(RecordStore):
    """Cliente asíncrono de PostgREST.

    Se usa como context manager para cerrar el `httpx.AsyncClient`:

        async with PostgrestRecordStore(settings) as store:
            ...
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client or build_async_client(self._settings)

    async def __aenter__(self) -> "PostgrestRecordStore":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        collection: str,
        *,
        params: dict[str, str] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        url = f"{REST_PREFIX}/{collection}"
        try:
            response = await self._client.request(
                method,
                url,
                params=params,
                json=json,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            raise StoreError(f"{method} {collection} failed: {exc}") from exc

        if response.status_code < 200 or response.status_code >= 300:
            raise _store_error_from_response(response)
        return response

    @staticmethod
    def _rows(response: httpx.Response) -> list[Record]:
        if not response.content:
            return []
        try:
            data = response.json()
        except ValueError as exc:
            raise StoreError(f"Malformed payload: {exc}", status_code=response.status_code) from exc
        if not isinstance(data, list):
            raise StoreError("Malformed payload: expected a JSON array", status_code=response.status_code)
        return [row for row in data if isinstance(row, dict)]

    async def delete(self, collection: str, predicate: Predicate) -> None:
        column, value = predicate.as_query_param()
        await self._request("DELETE", collection, params={column: value})

    async def insert(self, collection: str, records: Sequence[Record]) -> list[Record]:
        response = await self._request(
            "POST",
            collection,
            json=list(records),
            headers={"Prefer": "return=representation"},
        )
        return self._rows(response)

    async def select(
        self,
        collection: str,
        fields: Sequence[str] = ("id",),
        *,
        order_by: str = "id",
    ) -> list[Record]:
        response = await self._request(
            "GET",
            collection,
            params={"select": ",".join(fields), "order": f"{order_by}.asc"},
        )
        return self._rows(response)
