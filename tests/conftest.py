"""
Pytest configuration and fixtures.
Keeps tests away from real .env files and the remote store.
"""

from __future__ import annotations

from datetime import date

import pytest

from adapters.memory_store import InMemoryRecordStore
from core.config import AppSettings
from core.domain.errors import StoreError

TODAY = date(2026, 10, 19)


class RecordingStore(InMemoryRecordStore):
    """In-memory store that records every call and can be told to fail."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.calls: list[tuple[str, str]] = []
        self.inserted: dict[str, list[list[dict]]] = {}
        self._failures: dict[tuple[str, str], StoreError] = {}

    def fail(self, method: str, collection: str, error: StoreError | None = None) -> None:
        self._failures[(method, collection)] = error or StoreError(f"{method} {collection} exploded")

    def _maybe_fail(self, method: str, collection: str) -> None:
        error = self._failures.get((method, collection))
        if error is not None:
            raise error

    async def delete(self, collection, predicate):
        self.calls.append(("delete", collection))
        self._maybe_fail("delete", collection)
        await super().delete(collection, predicate)

    async def insert(self, collection, records):
        self.calls.append(("insert", collection))
        self._maybe_fail("insert", collection)
        inserted = await super().insert(collection, records)
        self.inserted.setdefault(collection, []).append([dict(r) for r in records])
        return inserted

    async def select(self, collection, fields=("id",), *, order_by="id"):
        self.calls.append(("select", collection))
        self._maybe_fail("select", collection)
        return await super().select(collection, fields, order_by=order_by)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run every test from an empty directory with no HOTEL_SEEDER_* variables.

    HOME and XDG_CONFIG_HOME point inside tmp_path so the user's real
    hotel-seeder .env (and the store it configures) is never read.
    """
    import os

    for key in list(os.environ):
        if key.startswith("HOTEL_SEEDER_"):
            monkeypatch.delenv(key, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.delenv("APPDATA", raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def settings():
    return AppSettings(_env_file=None)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def memory_store():
    return InMemoryRecordStore()


@pytest.fixture
def recording_store():
    return RecordingStore()
