"""
Tests for the in-memory record store and the predicate it evaluates.
"""

import pytest

from adapters.memory_store import InMemoryRecordStore
from core.domain.errors import StoreError
from core.interfaces.record_store import Predicate


@pytest.mark.asyncio
async def test_delete_match_all_empties_collection_and_keeps_sequence(memory_store):
    await memory_store.insert("guests", [{"fullName": "A"}, {"fullName": "B"}])

    await memory_store.delete("guests", Predicate.match_all())
    inserted = await memory_store.insert("guests", [{"fullName": "C"}])

    assert memory_store.rows("guests") == [{"fullName": "C", "id": 3}]
    assert inserted == [{"fullName": "C", "id": 3}]


@pytest.mark.asyncio
async def test_rejected_column_is_reported_structurally():
    store = InMemoryRecordStore(rejected_columns={"nationalID"})

    with pytest.raises(StoreError) as excinfo:
        await store.insert("guests", [{"fullName": "A", "nationalID": "1"}])

    assert excinfo.value.code == "PGRST204"
    assert excinfo.value.column == "nationalID"
    assert store.rows("guests") == []


def test_match_all_is_id_greater_than_zero():
    predicate = Predicate.match_all()

    assert predicate.matches({"id": 1})
    assert not predicate.matches({"id": 0})
    assert not predicate.matches({"name": "no id"})
    assert predicate.as_query_param() == ("id", "gt.0")


def test_unsupported_operator_is_rejected():
    with pytest.raises(ValueError, match="Unsupported predicate operator"):
        Predicate(column="id", operator="eq", value=1).matches({"id": 1})
