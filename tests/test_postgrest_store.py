"""
Tests for the PostgREST record store using httpx.MockTransport.
"""

import json

import httpx
import pytest

from adapters.http_client import build_async_client
from adapters.postgrest_store import PostgrestRecordStore
from core.config import AppSettings
from core.domain.errors import StoreError
from core.interfaces.record_store import Predicate
from core.services.seed_synchronizer import SeedSynchronizer
from core.seed_data import GUESTS


@pytest.fixture
def store_settings():
    return AppSettings(
        _env_file=None,
        store_url="https://demo.supabase.co/",
        store_api_key="secret-key",
    )


def _store(settings, handler):
    client = build_async_client(settings, transport=httpx.MockTransport(handler))
    return PostgrestRecordStore(settings, client=client)


@pytest.mark.asyncio
async def test_delete_sends_match_all_filter(store_settings):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(204)

    async with _store(store_settings, handler) as store:
        await store.delete("bookings", Predicate.match_all())

    [request] = seen
    assert request.method == "DELETE"
    assert request.url.path == "/rest/v1/bookings"
    assert request.url.params["id"] == "gt.0"
    assert request.headers["apikey"] == "secret-key"
    assert request.headers["authorization"] == "Bearer secret-key"


@pytest.mark.asyncio
async def test_select_orders_by_id(store_settings):
    def handler(request):
        assert request.method == "GET"
        assert request.url.params["select"] == "id"
        assert request.url.params["order"] == "id.asc"
        return httpx.Response(200, json=[{"id": 3}, {"id": 7}])

    async with _store(store_settings, handler) as store:
        rows = await store.select("guests", ("id",))

    assert rows == [{"id": 3}, {"id": 7}]


@pytest.mark.asyncio
async def test_insert_returns_representation(store_settings):
    def handler(request):
        assert request.method == "POST"
        assert request.headers["prefer"] == "return=representation"
        body = json.loads(request.content)
        return httpx.Response(201, json=[{**row, "id": i} for i, row in enumerate(body, start=1)])

    async with _store(store_settings, handler) as store:
        rows = await store.insert("cabins", [{"name": "001"}, {"name": "002"}])

    assert rows == [{"name": "001", "id": 1}, {"name": "002", "id": 2}]


@pytest.mark.asyncio
async def test_missing_column_is_structured(store_settings):
    def handler(request):
        return httpx.Response(
            400,
            json={
                "code": "PGRST204",
                "details": None,
                "hint": None,
                "message": "Could not find the 'nationalID' column of 'guests' in the schema cache",
            },
        )

    async with _store(store_settings, handler) as store:
        with pytest.raises(StoreError) as excinfo:
            await store.insert("guests", [{"nationalID": "1"}])

    assert excinfo.value.code == "PGRST204"
    assert excinfo.value.column == "nationalID"
    assert excinfo.value.status_code == 400


@pytest.mark.asyncio
async def test_undefined_column_sqlstate(store_settings):
    def handler(request):
        return httpx.Response(
            400,
            json={"code": "42703", "message": 'column "national_id" of relation "guests" does not exist'},
        )

    async with _store(store_settings, handler) as store:
        with pytest.raises(StoreError) as excinfo:
            await store.insert("guests", [{"national_id": "1"}])

    assert excinfo.value.column == "national_id"


@pytest.mark.asyncio
async def test_other_errors_have_no_column(store_settings):
    def handler(request):
        return httpx.Response(
            409,
            json={"code": "23505", "message": 'duplicate key value violates unique constraint "guests_email_key"'},
        )

    async with _store(store_settings, handler) as store:
        with pytest.raises(StoreError) as excinfo:
            await store.insert("guests", [{"email": "x"}])

    assert excinfo.value.code == "23505"
    assert excinfo.value.column is None


@pytest.mark.asyncio
async def test_non_json_error_body(store_settings):
    def handler(request):
        return httpx.Response(502, text="Bad Gateway")

    async with _store(store_settings, handler) as store:
        with pytest.raises(StoreError) as excinfo:
            await store.select("guests")

    assert excinfo.value.status_code == 502
    assert excinfo.value.message == "Bad Gateway"


@pytest.mark.asyncio
async def test_transport_error_becomes_store_error(store_settings):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with _store(store_settings, handler) as store:
        with pytest.raises(StoreError) as excinfo:
            await store.delete("guests", Predicate.match_all())

    assert "connection refused" in excinfo.value.message


@pytest.mark.asyncio
async def test_synchronizer_retries_guests_over_http(store_settings):
    bodies = []

    def handler(request):
        body = json.loads(request.content)
        bodies.append(body)
        if any("nationalID" in row for row in body):
            return httpx.Response(
                400,
                json={
                    "code": "PGRST204",
                    "message": "Could not find the 'nationalID' column of 'guests' in the schema cache",
                },
            )
        return httpx.Response(201, json=[{**row, "id": i} for i, row in enumerate(body, start=1)])

    async with _store(store_settings, handler) as store:
        sync = SeedSynchronizer(store, settings=store_settings, cabins=[])
        counts = await sync.seed_guests_and_cabins()

    assert counts["guests"] == len(GUESTS)
    assert len(bodies) == 3
    assert all("nationalID" not in row for row in bodies[1])
